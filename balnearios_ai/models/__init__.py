"""
Modelos de la aplicación: ORM (``models.db``) y esquemas Pydantic de la API.
"""
