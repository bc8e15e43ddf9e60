"""Shared base for records parsed from XML."""

from pydantic import BaseModel
from pydantic.alias_generators import to_pascal


class XMLRecord(BaseModel):
    """Base class for every parsed record.

    Attributes are snake_case in Python and serialize under PascalCase JSON
    keys. Acronym fields (PMID, ISSN, ...) declare an explicit alias.
    """

    model_config = {"alias_generator": to_pascal, "populate_by_name": True}
