"""
base.py — Shared pydantic base for upstream wire shapes.

The upstream service speaks camelCase JSON; models keep snake_case
attributes and serialize by alias.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
