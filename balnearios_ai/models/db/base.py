"""
Base declarativa para los modelos de base de datos
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
