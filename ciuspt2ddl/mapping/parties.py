"""Party and unload-place address mapping shared by invoices and credit notes."""

from typing import Optional

from ciuspt2ddl.ddl.models import Party, UnloadPlaceAddress
from ciuspt2ddl.ubl import cac


def map_party(party: Optional[cac.Party], location: Optional[cac.DeliveryLocation]) -> Optional[Party]:
    """Build a DDL `Party` from a UBL party and the delivery location it receives goods at.

    Every step tolerates a missing node and leaves the field unset. The GLN
    comes from the location, not from the party.

    Returns:
        Party | None: `None` when there is no party and the location carries no GLN.
    """
    if party is None and (location is None or location.id is None):
        return None

    identification = party.party_identification[0] if party and party.party_identification else None
    party_name = party.party_name[0] if party and party.party_name else None
    address = party.postal_address if party else None
    country = address.country if address else None

    return Party(
        federal_tax_id=identification.id if identification else None,
        organization_name=party_name.name if party_name else None,
        address_line1=address.street_name if address else None,
        address_line2=address.additional_street_name if address else None,
        postal_code=address.postal_zone if address else None,
        country_id=country.identification_code if country else None,
        gln=location.id if location else None,
    )


def map_unload_place_address(address: Optional[cac.Address]) -> Optional[UnloadPlaceAddress]:
    """Build the DDL unload place from a delivery address.

    `PostalCode` is always "<postal zone> <country subentity>" joined by a
    single space, with an empty token for a missing side.
    """
    if address is None:
        return None

    postal_zone = address.postal_zone or ""
    country_subentity = address.country_subentity or ""

    return UnloadPlaceAddress(
        address_line1=address.street_name,
        address_line2=address.additional_street_name,
        postal_code=f"{postal_zone} {country_subentity}",
        country_id=address.country.identification_code if address.country else None,
    )
