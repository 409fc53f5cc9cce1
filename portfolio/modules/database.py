import logging
from databases import Database
from portfolio.modules.config import DATABASE_URL

logger = logging.getLogger("portfolio.database")

# Create the database instance
database = Database(DATABASE_URL)

SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS projects (
        id SERIAL PRIMARY KEY,
        title VARCHAR(255) NOT NULL,
        description VARCHAR(2000),
        summary VARCHAR(1000),
        github_url VARCHAR(255),
        live_url VARCHAR(255),
        image_url VARCHAR(2000),
        start_date TIMESTAMP,
        end_date TIMESTAMP,
        featured BOOLEAN NOT NULL DEFAULT FALSE,
        created_at TIMESTAMP,
        updated_at TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS project_technologies (
        project_id INTEGER NOT NULL REFERENCES projects(id) ON DELETE CASCADE,
        technology VARCHAR(255) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS project_categories (
        project_id INTEGER NOT NULL REFERENCES projects(id) ON DELETE CASCADE,
        category VARCHAR(255) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS skills (
        id SERIAL PRIMARY KEY,
        name VARCHAR(255) NOT NULL,
        category VARCHAR(255),
        proficiency_level INTEGER,
        icon_url VARCHAR(1000),
        years_of_experience INTEGER,
        created_at TIMESTAMP,
        updated_at TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS experiences (
        id SERIAL PRIMARY KEY,
        company VARCHAR(255) NOT NULL,
        position VARCHAR(255) NOT NULL,
        description VARCHAR(2000),
        location VARCHAR(255),
        start_date TIMESTAMP,
        end_date TIMESTAMP,
        current BOOLEAN NOT NULL DEFAULT FALSE,
        company_logo_url VARCHAR(1000),
        created_at TIMESTAMP,
        updated_at TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS experience_responsibilities (
        experience_id INTEGER NOT NULL REFERENCES experiences(id) ON DELETE CASCADE,
        responsibility VARCHAR(1000) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS experience_technologies (
        experience_id INTEGER NOT NULL REFERENCES experiences(id) ON DELETE CASCADE,
        technology VARCHAR(255) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS user_profiles (
        id SERIAL PRIMARY KEY,
        full_name VARCHAR(255) NOT NULL,
        username VARCHAR(255) NOT NULL UNIQUE,
        bio VARCHAR(1000),
        title VARCHAR(255),
        location VARCHAR(255),
        email VARCHAR(255),
        github_url VARCHAR(255),
        linkedin_url VARCHAR(255),
        twitter_url VARCHAR(255),
        website_url VARCHAR(255),
        resume_url VARCHAR(1000),
        profile_image_url VARCHAR(2000),
        created_at TIMESTAMP,
        updated_at TIMESTAMP
    )
    """,
]


async def connect_to_db():
    await database.connect()
    logger.info("Database connection established")


async def disconnect_from_db():
    await database.disconnect()
    logger.info("Database connection closed")


async def init_db():
    """Create the portfolio tables if they do not exist yet."""
    for statement in SCHEMA:
        await database.execute(query=statement)
    logger.info(f"Schema ready ({len(SCHEMA)} tables)")
