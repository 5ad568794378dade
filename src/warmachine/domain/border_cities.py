"""Border settlement registry.

Maps each country to the settlements that front each compass side.  These
are the cities an invader reaches first when attacking from that side, in
the order they are declared.  Countries without registered border cities are
simply absent; lookups for them return an empty tuple.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from warmachine.domain.enums import BorderDirection, Country
from warmachine.domain.models import BorderCity

BORDER_CITIES: Mapping[Country, tuple[BorderCity, ...]] = MappingProxyType({
    # North America
    Country.USA: (
        BorderCity("usa-boston", "Boston", BorderDirection.NORTH),
        BorderCity("usa-seattle", "Seattle", BorderDirection.NORTH),
        BorderCity("usa-detroit", "Detroit", BorderDirection.NORTH),
        BorderCity("usa-newyork", "New York", BorderDirection.NORTH),
        BorderCity("usa-sandiego", "San Diego", BorderDirection.SOUTH),
        BorderCity("usa-houston", "Houston", BorderDirection.SOUTH),
        BorderCity("usa-miami", "Miami", BorderDirection.SOUTH),
    ),
    Country.CANADA: (
        BorderCity("canada-vancouver", "Vancouver", BorderDirection.SOUTH),
        BorderCity("canada-toronto", "Toronto", BorderDirection.SOUTH),
        BorderCity("canada-montreal", "Montreal", BorderDirection.SOUTH),
    ),
    Country.MEXICO: (
        BorderCity("mexico-tijuana", "Tijuana", BorderDirection.NORTH),
        BorderCity("mexico-juarez", "Juarez", BorderDirection.NORTH),
        BorderCity("mexico-monterrey", "Monterrey", BorderDirection.NORTH),
    ),
    # Europe
    Country.UK: (
        BorderCity("uk-london", "London", BorderDirection.SOUTH),
    ),
    Country.FRANCE: (
        BorderCity("france-lille", "Lille", BorderDirection.NORTH),
        BorderCity("france-strasbourg", "Strasbourg", BorderDirection.EAST),
        BorderCity("france-lyon", "Lyon", BorderDirection.EAST),
        BorderCity("france-nice", "Nice", BorderDirection.SOUTH),
    ),
    Country.GERMANY: (
        BorderCity("germany-hamburg", "Hamburg", BorderDirection.NORTH),
        BorderCity("germany-dresden", "Dresden", BorderDirection.EAST),
        BorderCity("germany-munich", "Munich", BorderDirection.SOUTH),
        BorderCity("germany-stuttgart", "Stuttgart", BorderDirection.SOUTH),
        BorderCity("germany-cologne", "Cologne", BorderDirection.WEST),
        BorderCity("germany-frankfurt", "Frankfurt", BorderDirection.WEST),
    ),
    Country.POLAND: (
        BorderCity("poland-gdansk", "Gdansk", BorderDirection.NORTH),
        BorderCity("poland-bialystok", "Bialystok", BorderDirection.EAST),
        BorderCity("poland-lublin", "Lublin", BorderDirection.EAST),
        BorderCity("poland-krakow", "Krakow", BorderDirection.SOUTH),
        BorderCity("poland-poznan", "Poznan", BorderDirection.WEST),
        BorderCity("poland-wroclaw", "Wroclaw", BorderDirection.WEST),
    ),
    Country.SPAIN: (
        BorderCity("spain-bilbao", "Bilbao", BorderDirection.NORTH),
        BorderCity("spain-barcelona", "Barcelona", BorderDirection.NORTH),
        BorderCity("spain-vigo", "Vigo", BorderDirection.WEST),
    ),
    Country.ITALY: (
        BorderCity("italy-milan", "Milan", BorderDirection.NORTH),
        BorderCity("italy-turin", "Turin", BorderDirection.NORTH),
        BorderCity("italy-venice", "Venice", BorderDirection.NORTH),
        BorderCity("italy-genoa", "Genoa", BorderDirection.WEST),
    ),
    # Russia (major borders)
    Country.RUSSIA: (
        BorderCity("russia-stpetersburg", "St Petersburg", BorderDirection.WEST),
        BorderCity("russia-rostov", "Rostov-on-Don", BorderDirection.WEST),
        BorderCity("russia-vladivostok", "Vladivostok", BorderDirection.SOUTH),
        BorderCity("russia-irkutsk", "Irkutsk", BorderDirection.SOUTH),
        BorderCity("russia-khabarovsk", "Khabarovsk", BorderDirection.EAST),
    ),
    # China
    Country.CHINA: (
        BorderCity("china-harbin", "Harbin", BorderDirection.NORTH),
        BorderCity("china-guangzhou", "Guangzhou", BorderDirection.SOUTH),
        BorderCity("china-kunming", "Kunming", BorderDirection.SOUTH),
        BorderCity("china-shanghai", "Shanghai", BorderDirection.EAST),
        BorderCity("china-qingdao", "Qingdao", BorderDirection.EAST),
        BorderCity("china-urumqi", "Urumqi", BorderDirection.WEST),
        BorderCity("china-lhasa", "Lhasa", BorderDirection.WEST),
    ),
    # India
    Country.INDIA: (
        BorderCity("india-delhi", "New Delhi", BorderDirection.NORTH),
        BorderCity("india-amritsar", "Amritsar", BorderDirection.WEST),
        BorderCity("india-jaipur", "Jaipur", BorderDirection.WEST),
        BorderCity("india-kolkata", "Kolkata", BorderDirection.EAST),
    ),
    # Japan
    Country.JAPAN: (
        BorderCity("japan-fukuoka", "Fukuoka", BorderDirection.WEST),
        BorderCity("japan-hiroshima", "Hiroshima", BorderDirection.WEST),
        BorderCity("japan-osaka", "Osaka", BorderDirection.WEST),
    ),
    # Middle East
    Country.TURKEY: (
        BorderCity("turkey-istanbul", "Istanbul", BorderDirection.WEST),
        BorderCity("turkey-izmir", "Izmir", BorderDirection.WEST),
        BorderCity("turkey-adana", "Adana", BorderDirection.SOUTH),
        BorderCity("turkey-gaziantep", "Gaziantep", BorderDirection.SOUTH),
        BorderCity("turkey-erzurum", "Erzurum", BorderDirection.EAST),
    ),
    Country.SAUDI_ARABIA: (
        BorderCity("saudi-tabuk", "Tabuk", BorderDirection.NORTH),
        BorderCity("saudi-dammam", "Dammam", BorderDirection.EAST),
    ),
    Country.ISRAEL: (
        BorderCity("israel-haifa", "Haifa", BorderDirection.NORTH),
        BorderCity("israel-eilat", "Eilat", BorderDirection.SOUTH),
        BorderCity("israel-jerusalem", "Jerusalem", BorderDirection.EAST),
    ),
    # Africa
    Country.EGYPT: (
        BorderCity("egypt-alexandria", "Alexandria", BorderDirection.NORTH),
        BorderCity("egypt-aswan", "Aswan", BorderDirection.SOUTH),
    ),
    Country.SOUTH_AFRICA: (
        BorderCity("southafrica-johannesburg", "Johannesburg", BorderDirection.NORTH),
        BorderCity("southafrica-pretoria", "Pretoria", BorderDirection.NORTH),
    ),
    Country.NIGERIA: (
        BorderCity("nigeria-kano", "Kano", BorderDirection.NORTH),
        BorderCity("nigeria-calabar", "Calabar", BorderDirection.EAST),
        BorderCity("nigeria-lagos", "Lagos", BorderDirection.WEST),
    ),
    # South America
    Country.BRAZIL: (
        BorderCity("brazil-manaus", "Manaus", BorderDirection.NORTH),
        BorderCity("brazil-belem", "Belem", BorderDirection.NORTH),
        BorderCity("brazil-portoalegre", "Porto Alegre", BorderDirection.SOUTH),
    ),
    Country.ARGENTINA: (
        BorderCity("argentina-salta", "Salta", BorderDirection.NORTH),
        BorderCity("argentina-cordoba", "Cordoba", BorderDirection.NORTH),
        BorderCity("argentina-mendoza", "Mendoza", BorderDirection.WEST),
    ),
    # Australia/Oceania
    Country.AUSTRALIA: (
        BorderCity("australia-darwin", "Darwin", BorderDirection.NORTH),
        BorderCity("australia-cairns", "Cairns", BorderDirection.NORTH),
        BorderCity("australia-brisbane", "Brisbane", BorderDirection.EAST),
    ),
    Country.PORTUGAL: (
        BorderCity("portugal-porto", "Porto", BorderDirection.EAST),
        BorderCity("portugal-lisbon", "Lisbon", BorderDirection.EAST),
    ),
    Country.NORWAY: (
        BorderCity("norway-oslo", "Oslo", BorderDirection.EAST),
    ),
    Country.SWEDEN: (
        BorderCity("sweden-stockholm", "Stockholm", BorderDirection.WEST),
        BorderCity("sweden-malmo", "Malmo", BorderDirection.SOUTH),
    ),
    Country.FINLAND: (
        BorderCity("finland-joensuu", "Joensuu", BorderDirection.EAST),
        BorderCity("finland-lappeenranta", "Lappeenranta", BorderDirection.EAST),
    ),
    Country.UKRAINE: (
        BorderCity("ukraine-kharkiv", "Kharkiv", BorderDirection.EAST),
        BorderCity("ukraine-sumy", "Sumy", BorderDirection.EAST),
        BorderCity("ukraine-luhansk", "Luhansk", BorderDirection.EAST),
        BorderCity("ukraine-donetsk", "Donetsk", BorderDirection.EAST),
        BorderCity("ukraine-lviv", "Lviv", BorderDirection.WEST),
        BorderCity("ukraine-lutsk", "Lutsk", BorderDirection.WEST),
        BorderCity("ukraine-odesa", "Odesa", BorderDirection.SOUTH),
        BorderCity("ukraine-mariupol", "Mariupol", BorderDirection.SOUTH),
        BorderCity("ukraine-chernihiv", "Chernihiv", BorderDirection.NORTH),
    ),
    Country.DENMARK: (
        BorderCity("denmark-copenhagen", "Copenhagen", BorderDirection.SOUTH),
    ),
    Country.NETHERLANDS: (
        BorderCity("netherlands-amsterdam", "Amsterdam", BorderDirection.EAST),
    ),
    Country.BELGIUM: (
        BorderCity("belgium-brussels", "Brussels", BorderDirection.NORTH),
    ),
    Country.SWITZERLAND: (
        BorderCity("switzerland-zurich", "Zurich", BorderDirection.NORTH),
    ),
    Country.GREECE: (
        BorderCity("greece-athens", "Athens", BorderDirection.SOUTH),
    ),
    Country.ESTONIA: (
        BorderCity("estonia-tallinn", "Tallinn", BorderDirection.EAST),
    ),
    Country.LATVIA: (
        BorderCity("latvia-valmiera", "Valmiera", BorderDirection.NORTH),
        BorderCity("latvia-cesis", "Cesis", BorderDirection.NORTH),
        BorderCity("latvia-daugavpils", "Daugavpils", BorderDirection.SOUTH),
        BorderCity("latvia-jekabpils", "Jekabpils", BorderDirection.SOUTH),
        BorderCity("latvia-rezekne", "Rezekne", BorderDirection.EAST),
        BorderCity("latvia-daugavpils", "Daugavpils", BorderDirection.EAST),
        BorderCity("latvia-liepaja", "Liepaja", BorderDirection.WEST),
        BorderCity("latvia-ventspils", "Ventspils", BorderDirection.WEST),
        BorderCity("latvia-riga", "Riga", BorderDirection.WEST),
    ),
    Country.INDONESIA: (
        BorderCity("indonesia-jakarta", "Jakarta", BorderDirection.NORTH),
    ),
    Country.SOUTH_KOREA: (
        BorderCity("southkorea-seoul", "Seoul", BorderDirection.WEST),
    ),
    Country.IRAN: (
        BorderCity("iran-urmia", "Urmia", BorderDirection.WEST),
        BorderCity("iran-kermanshah", "Kermanshah", BorderDirection.WEST),
        BorderCity("iran-ahvaz", "Ahvaz", BorderDirection.WEST),
        BorderCity("iran-zahedan", "Zahedan", BorderDirection.EAST),
        BorderCity("iran-mashhad", "Mashhad", BorderDirection.EAST),
        BorderCity("iran-bushehr", "Bushehr", BorderDirection.SOUTH),
        BorderCity("iran-bandarabbas", "Bandar Abbas", BorderDirection.SOUTH),
        BorderCity("iran-rasht", "Rasht", BorderDirection.NORTH),
        BorderCity("iran-gorgan", "Gorgan", BorderDirection.NORTH),
    ),
    Country.IRAQ: (
        BorderCity("iraq-sulaymaniyah", "Sulaymaniyah", BorderDirection.EAST),
        BorderCity("iraq-kirkuk", "Kirkuk", BorderDirection.EAST),
        BorderCity("iraq-amarah", "Amarah", BorderDirection.EAST),
        BorderCity("iraq-mosul", "Mosul", BorderDirection.NORTH),
        BorderCity("iraq-dohuk", "Dohuk", BorderDirection.NORTH),
        BorderCity("iraq-zakho", "Zakho", BorderDirection.NORTH),
        BorderCity("iraq-ramadi", "Ramadi", BorderDirection.WEST),
        BorderCity("iraq-fallujah", "Fallujah", BorderDirection.WEST),
        BorderCity("iraq-basra", "Basra", BorderDirection.SOUTH),
        BorderCity("iraq-nasiriyah", "Nasiriyah", BorderDirection.SOUTH),
    ),
    Country.SUDAN: (
        BorderCity("sudan-wadihalfa", "Wadi Halfa", BorderDirection.NORTH),
        BorderCity("sudan-dongola", "Dongola", BorderDirection.NORTH),
        BorderCity("sudan-atbara", "Atbara", BorderDirection.NORTH),
        BorderCity("sudan-kassala", "Kassala", BorderDirection.EAST),
        BorderCity("sudan-gedaref", "Gedaref", BorderDirection.EAST),
        BorderCity("sudan-portsudaan", "Port Sudan", BorderDirection.EAST),
        BorderCity("sudan-elgeneina", "El Geneina", BorderDirection.WEST),
        BorderCity("sudan-elfasher", "El Fasher", BorderDirection.WEST),
        BorderCity("sudan-juba", "Juba", BorderDirection.SOUTH),
        BorderCity("sudan-malakal", "Malakal", BorderDirection.SOUTH),
        BorderCity("sudan-wau", "Wau", BorderDirection.SOUTH),
    ),
    Country.PAKISTAN: (
        BorderCity("pakistan-quetta", "Quetta", BorderDirection.WEST),
        BorderCity("pakistan-gwadar", "Gwadar", BorderDirection.WEST),
        BorderCity("pakistan-lahore", "Lahore", BorderDirection.EAST),
        BorderCity("pakistan-sialkot", "Sialkot", BorderDirection.EAST),
        BorderCity("pakistan-mirpurkhas", "Mirpur Khas", BorderDirection.EAST),
        BorderCity("pakistan-gilgit", "Gilgit", BorderDirection.NORTH),
        BorderCity("pakistan-peshawar", "Peshawar", BorderDirection.NORTH),
        BorderCity("pakistan-karachi", "Karachi", BorderDirection.SOUTH),
        BorderCity("pakistan-hyderabad", "Hyderabad", BorderDirection.SOUTH),
    ),
    Country.LITHUANIA: (
        BorderCity("lithuania-siauliai", "Siauliai", BorderDirection.NORTH),
        BorderCity("lithuania-panevezys", "Panevezys", BorderDirection.NORTH),
        BorderCity("lithuania-mazeikiai", "Mazeikiai", BorderDirection.NORTH),
        BorderCity("lithuania-visaginas", "Visaginas", BorderDirection.EAST),
        BorderCity("lithuania-marijampole", "Marijampole", BorderDirection.SOUTH),
        BorderCity("lithuania-alytus", "Alytus", BorderDirection.SOUTH),
        BorderCity("lithuania-druskininkai", "Druskininkai", BorderDirection.SOUTH),
        BorderCity("lithuania-klaipeda", "Klaipeda", BorderDirection.WEST),
        BorderCity("lithuania-palanga", "Palanga", BorderDirection.WEST),
        BorderCity("lithuania-kretinga", "Kretinga", BorderDirection.WEST),
    ),
})


def border_cities(country: Country) -> tuple[BorderCity, ...]:
    return BORDER_CITIES.get(country, ())


def border_cities_for_direction(country: Country, direction: BorderDirection) -> list[BorderCity]:
    """Ordered settlements fronting ``direction``; empty when none are registered."""

    return [city for city in border_cities(country) if city.direction == direction]


def border_directions(country: Country) -> list[BorderDirection]:
    """Directions for which ``country`` registers at least one border city."""

    return [d for d in BorderDirection if border_cities_for_direction(country, d)]
