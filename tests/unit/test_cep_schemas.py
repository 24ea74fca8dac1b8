import pytest
from pydantic import ValidationError

from app.core.schemas import Address, BrasilAPIResponse, RaceResult, ViaCEPResponse

EXPECTED = Address(
    postal_code="70150900",
    street="Praça dos Três Poderes",
    neighborhood="Zona Cívico-Administrativa",
    city="Brasília",
    state_code="DF",
)


@pytest.mark.unit
def test_brasilapi_response_maps_to_address(brasilapi_payload) -> None:
    address = BrasilAPIResponse.model_validate(brasilapi_payload).to_address()

    assert address == EXPECTED


@pytest.mark.unit
def test_viacep_response_maps_to_address(viacep_payload) -> None:
    address = ViaCEPResponse.model_validate(viacep_payload).to_address()

    assert address == EXPECTED


@pytest.mark.unit
def test_conversion_is_deterministic(brasilapi_payload) -> None:
    first = BrasilAPIResponse.model_validate(brasilapi_payload).to_address()
    second = BrasilAPIResponse.model_validate(brasilapi_payload).to_address()

    assert first == second
    assert first.model_dump() == second.model_dump()


@pytest.mark.unit
def test_missing_and_null_fields_become_empty_strings() -> None:
    address = ViaCEPResponse.model_validate({"cep": "01001000", "bairro": None}).to_address()

    assert address == Address(postal_code="01001000")
    assert address.neighborhood == ""
    assert address.street == ""


@pytest.mark.unit
def test_non_object_payload_is_rejected() -> None:
    with pytest.raises(ValidationError):
        BrasilAPIResponse.model_validate(["70150900"])


@pytest.mark.unit
def test_address_is_immutable() -> None:
    with pytest.raises(ValidationError):
        EXPECTED.city = "Goiânia"


@pytest.mark.unit
def test_race_result_carries_provider_and_address() -> None:
    result = RaceResult(provider="ViaCEP", address=EXPECTED)

    assert result.model_dump() == {
        "provider": "ViaCEP",
        "address": {
            "postal_code": "70150900",
            "street": "Praça dos Três Poderes",
            "neighborhood": "Zona Cívico-Administrativa",
            "city": "Brasília",
            "state_code": "DF",
        },
    }
