from ciuspt2ddl.ddl.models import Party, UnloadPlaceAddress
from ciuspt2ddl.mapping.parties import map_party, map_unload_place_address
from ciuspt2ddl.ubl import cac


def _party() -> cac.Party:
    return cac.Party(
        party_identification=[cac.PartyIdentification(id="PT509876543"), cac.PartyIdentification(id="OTHER")],
        party_name=[cac.PartyName(name="Cliente Retalho SA"), cac.PartyName(name="Second Name")],
        postal_address=cac.PostalAddress(
            street_name="Rua do Cliente 5",
            additional_street_name="Piso 2",
            postal_zone="4000-123",
            country_subentity="Porto",
            country=cac.Country(identification_code="PT"),
        ),
    )


def test_map_party_takes_first_entries_and_location_gln():
    location = cac.DeliveryLocation(id="5609876000012")

    assert map_party(_party(), location) == Party(
        federal_tax_id="PT509876543",
        organization_name="Cliente Retalho SA",
        address_line1="Rua do Cliente 5",
        address_line2="Piso 2",
        postal_code="4000-123",
        country_id="PT",
        gln="5609876000012",
    )


def test_map_party_postal_code_is_postal_zone_only():
    party = map_party(_party(), None)

    assert party is not None
    assert party.postal_code == "4000-123"
    assert party.gln is None


def test_map_party_tolerates_empty_party():
    party = map_party(cac.Party(), None)

    assert party == Party()


def test_map_party_without_postal_address():
    party = map_party(cac.Party(party_name=[cac.PartyName(name="Only Name")]), None)

    assert party is not None
    assert party.organization_name == "Only Name"
    assert party.address_line1 is None
    assert party.country_id is None


def test_map_party_address_without_country():
    party = map_party(cac.Party(postal_address=cac.PostalAddress(street_name="Rua X")), None)

    assert party is not None
    assert party.address_line1 == "Rua X"
    assert party.country_id is None


def test_map_party_identification_without_id():
    party = map_party(cac.Party(party_identification=[cac.PartyIdentification()]), None)

    assert party is not None
    assert party.federal_tax_id is None


def test_map_party_location_only():
    party = map_party(None, cac.DeliveryLocation(id="5600000000001"))

    assert party == Party(gln="5600000000001")


def test_map_party_nothing_to_map():
    assert map_party(None, None) is None
    assert map_party(None, cac.DeliveryLocation(address=cac.Address(street_name="Rua A"))) is None


def test_map_unload_place_address():
    address = cac.Address(
        street_name="Rua A",
        additional_street_name="Loja 1",
        postal_zone="1000",
        country_subentity="Lisboa",
        country=cac.Country(identification_code="PT"),
    )

    assert map_unload_place_address(address) == UnloadPlaceAddress(
        address_line1="Rua A",
        address_line2="Loja 1",
        postal_code="1000 Lisboa",
        country_id="PT",
    )


def test_map_unload_place_address_keeps_separator_for_missing_parts():
    assert map_unload_place_address(cac.Address(postal_zone="1000")).postal_code == "1000 "
    assert map_unload_place_address(cac.Address(country_subentity="Lisboa")).postal_code == " Lisboa"
    assert map_unload_place_address(cac.Address()).postal_code == " "


def test_map_unload_place_address_without_address():
    assert map_unload_place_address(None) is None
