"""Domain model for contract extraction.

``ContractExtraction`` is the single declaration of the extracted record. Its
field descriptions are rendered into the model instruction and the same model
produces the JSON Schema used to constrain and validate model output, so the
field list lives in exactly one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_ENGLISH = "Always written in English, even when the contract is in Spanish."
_NAMES = "Names are kept as written in the contract; any descriptive text is in English."
_EMPTY_STRING = "Use an empty string if the contract does not state it."
_EMPTY_LIST = "Use an empty list if none are found; never invent entries."


class ContractExtraction(BaseModel):
    """Key facts extracted from a legal contract."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        strict=True,
        frozen=True,
        extra="forbid",
    )

    signing_parties: tuple[str, ...] = Field(
        description=f"Names of all parties signing the contract. {_NAMES} {_EMPTY_LIST}",
    )
    start_date: str = Field(
        description=f"Contract start date or effective date. {_ENGLISH} {_EMPTY_STRING}",
    )
    end_date: str = Field(
        description=f"Contract end date or expiration date. {_ENGLISH} {_EMPTY_STRING}",
    )
    duration: str = Field(
        description=f"Contract duration or term length. {_ENGLISH} {_EMPTY_STRING}",
    )
    penalties: tuple[str, ...] = Field(
        description=(
            "Penalties, fines, or consequences mentioned in the contract. "
            f"{_ENGLISH} {_EMPTY_LIST}"
        ),
    )
    contract_purpose: str = Field(
        description=(
            "Main purpose or objective of the contract, summarized. "
            f"{_ENGLISH} {_EMPTY_STRING}"
        ),
    )
    key_clauses: tuple[str, ...] = Field(
        description=(
            "Important clauses, terms, or conditions in the contract. "
            f"{_ENGLISH} {_EMPTY_LIST}"
        ),
    )

    @field_validator("signing_parties", "penalties", "key_clauses", mode="before")
    @classmethod
    def _freeze_lists(cls, value: Any) -> Any:
        # JSON arrays arrive as lists; anything else is left to strict validation
        if isinstance(value, list):
            return tuple(value)
        return value

    @classmethod
    def empty(cls) -> "ContractExtraction":
        """Record with every field at its empty default."""
        return cls.model_validate(
            {spec.name: [] if spec.is_list else "" for spec in describe_fields()}
        )


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Wire name, structural kind and meaning of one extracted field."""

    name: str
    is_list: bool
    description: str

    @property
    def kind(self) -> str:
        return "list of strings" if self.is_list else "string"


def describe_fields() -> list[FieldSpec]:
    """Field rows in declaration order, keyed by their wire (camelCase) names."""
    return [
        FieldSpec(
            name=info.alias or name,
            is_list=info.annotation is not str,
            description=info.description or "",
        )
        for name, info in ContractExtraction.model_fields.items()
    ]


def extraction_json_schema() -> dict[str, Any]:
    """Strict JSON Schema for ``ContractExtraction`` using wire names.

    Every property is required and ``additionalProperties`` is false, which is
    the shape structured-output providers require in strict mode.
    """
    return ContractExtraction.model_json_schema(by_alias=True)
