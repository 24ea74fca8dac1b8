from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class BlankFieldsModel(BaseModel):
    """Absent or null fields collapse to an empty string."""

    @field_validator("*", mode="before")
    @classmethod
    def blank_if_none(cls, value: Any) -> Any:
        return "" if value is None else value


class Address(BlankFieldsModel):
    """Provider-agnostic postal address."""
    model_config = ConfigDict(frozen=True)

    postal_code: str = ""
    street: str = ""
    neighborhood: str = ""
    city: str = ""
    state_code: str = ""


class BrasilAPIResponse(BlankFieldsModel):
    model_config = ConfigDict(extra="ignore")

    cep: str = ""
    state: str = ""
    city: str = ""
    neighborhood: str = ""
    street: str = ""

    def to_address(self) -> Address:
        return Address(
            postal_code=self.cep,
            street=self.street,
            neighborhood=self.neighborhood,
            city=self.city,
            state_code=self.state,
        )


class ViaCEPResponse(BlankFieldsModel):
    """Raw ViaCEP payload. Field names already mirror the address 1:1."""
    model_config = ConfigDict(extra="ignore")

    cep: str = ""
    logradouro: str = ""
    complemento: str = ""
    bairro: str = ""
    localidade: str = ""
    uf: str = ""
    ibge: str = ""
    gia: str = ""
    ddd: str = ""
    siafi: str = ""

    def to_address(self) -> Address:
        return Address(
            postal_code=self.cep,
            street=self.logradouro,
            neighborhood=self.bairro,
            city=self.localidade,
            state_code=self.uf,
        )


class RaceResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    provider: str
    address: Address
