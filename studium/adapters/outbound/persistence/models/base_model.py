# studium/adapters/outbound/persistence/models/base_model.py

"""
Base declarativa e colunas compartilhadas pelos modelos.

A serialização para a API fica nos dtos de saída
(``studium.application.dtos``), não nos modelos.
"""

from sqlalchemy import BigInteger, Column, DateTime, Integer, func
from sqlalchemy.orm import declarative_base

# SQLite só faz autoincremento em INTEGER PRIMARY KEY
IdType = BigInteger().with_variant(Integer(), "sqlite")

Base = declarative_base()


class TimestampMixin:
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
