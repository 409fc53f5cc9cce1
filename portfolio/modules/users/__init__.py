"""
User Identity Module

Authentication, authorization and self-service registration backed by
Keycloak:
- auth: Bearer token validation and role mapping
- domain: Domain models
- services: Keycloak admin client and registration orchestration
- api: REST API endpoints
"""
