import re
from enum import Enum as PyEnum
from typing import Type

from sqlalchemy import Enum
from sqlalchemy.orm import DeclarativeBase, declared_attr


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Provides common configuration and mixins.
     """

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Automatically generate table name from class name.
          Example: BoardMember -> board_members
          """
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          # Pluralize (simple version)
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'


def status_type(enum_cls: Type[PyEnum], name: str) -> Enum:
     """
     Column type for a closed set of lowercase status values.

     Values (not member names) are stored, guarded by a CHECK constraint
     so the store rejects anything outside the enumeration.
     """
     return Enum(
          enum_cls,
          name=name,
          native_enum=False,
          create_constraint=True,
          length=20,
          values_callable=lambda members: [m.value for m in members],
          validate_strings=True,
     )
