"""
Portfolio Catalog Module

Projects, skills, experiences and the owner's profile, each with the usual
layering:
- domain: Domain models
- repositories: Data access
- services: Business logic and read caching
- api: REST API endpoints
"""
