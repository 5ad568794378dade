"""City grid per country.

Each country is laid out on a 10x10 grid (column 0 is the western edge, row
0 the northern edge).  Cities registered as border cities sit on the grid edge
of the side they front; every other city is inland.  Exactly one city per
country is the capital.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from warmachine.domain.enums import Country
from warmachine.domain.models import CityData

COUNTRY_CITIES: Mapping[Country, tuple[CityData, ...]] = MappingProxyType({
    Country.USA: (
        CityData("Washington DC", 7, 3, is_capital=True),
        CityData("Philadelphia", 7, 2),
        CityData("Chicago", 5, 2),
        CityData("Portland", 1, 1),
        CityData("San Francisco", 1, 4),
        CityData("Los Angeles", 1, 7),
        CityData("Las Vegas", 2, 5),
        CityData("Phoenix", 2, 7),
        CityData("Denver", 3, 4),
        CityData("Dallas", 4, 7),
        CityData("San Antonio", 4, 8),
        CityData("New Orleans", 6, 8),
        CityData("Atlanta", 7, 6),
        CityData("Seattle", 1, 0),
        CityData("Detroit", 5, 0),
        CityData("New York", 7, 0),
        CityData("Boston", 8, 0),
        CityData("San Diego", 1, 9),
        CityData("Houston", 5, 9),
        CityData("Miami", 8, 9),
    ),
    Country.CANADA: (
        CityData("Ottawa", 7, 7, is_capital=True),
        CityData("Calgary", 3, 7),
        CityData("Edmonton", 3, 5),
        CityData("Winnipeg", 5, 6),
        CityData("Quebec City", 8, 7),
        CityData("Halifax", 8, 6),
        CityData("Whitehorse", 1, 2),
        CityData("Yellowknife", 3, 2),
        CityData("Iqaluit", 7, 1),
        CityData("Regina", 4, 6),
        CityData("Vancouver", 1, 9),
        CityData("Toronto", 6, 9),
        CityData("Montreal", 7, 9),
    ),
    Country.MEXICO: (
        CityData("Mexico City", 5, 6, is_capital=True),
        CityData("Guadalajara", 4, 6),
        CityData("Puebla", 6, 6),
        CityData("Chihuahua", 3, 2),
        CityData("Hermosillo", 2, 2),
        CityData("Veracruz", 7, 6),
        CityData("Merida", 8, 5),
        CityData("Oaxaca", 6, 8),
        CityData("Acapulco", 5, 8),
        CityData("Leon", 4, 5),
        CityData("Tijuana", 1, 0),
        CityData("Juarez", 3, 0),
        CityData("Monterrey", 5, 0),
    ),
    Country.UK: (
        CityData("London", 6, 9, is_capital=True),
        CityData("Edinburgh", 4, 3),
        CityData("Glasgow", 3, 3),
        CityData("Manchester", 5, 6),
        CityData("Birmingham", 5, 7),
        CityData("Liverpool", 4, 6),
        CityData("Leeds", 5, 5),
        CityData("Newcastle", 5, 4),
        CityData("Belfast", 2, 5),
        CityData("Cardiff", 3, 8),
        CityData("Bristol", 4, 8),
        CityData("Aberdeen", 5, 1),
        CityData("Inverness", 4, 1),
    ),
    Country.FRANCE: (
        CityData("Paris", 5, 3, is_capital=True),
        CityData("Marseille", 7, 8),
        CityData("Toulouse", 4, 8),
        CityData("Bordeaux", 2, 7),
        CityData("Nantes", 2, 5),
        CityData("Rennes", 1, 4),
        CityData("Le Havre", 3, 2),
        CityData("Reims", 6, 2),
        CityData("Dijon", 7, 5),
        CityData("Montpellier", 6, 8),
        CityData("Clermont-Ferrand", 5, 6),
        CityData("Lille", 5, 0),
        CityData("Strasbourg", 9, 3),
        CityData("Lyon", 9, 6),
        CityData("Nice", 8, 9),
    ),
    Country.GERMANY: (
        CityData("Berlin", 7, 4, is_capital=True),
        CityData("Bremen", 3, 1),
        CityData("Hanover", 4, 3),
        CityData("Leipzig", 7, 5),
        CityData("Nuremberg", 6, 7),
        CityData("Dusseldorf", 1, 4),
        CityData("Dortmund", 2, 4),
        CityData("Kiel", 5, 1),
        CityData("Rostock", 7, 1),
        CityData("Essen", 2, 5),
        CityData("Hamburg", 4, 0),
        CityData("Dresden", 9, 5),
        CityData("Munich", 6, 9),
        CityData("Stuttgart", 3, 9),
        CityData("Cologne", 0, 5),
        CityData("Frankfurt", 0, 6),
    ),
    Country.POLAND: (
        CityData("Warsaw", 6, 4, is_capital=True),
        CityData("Lodz", 5, 5),
        CityData("Szczecin", 1, 2),
        CityData("Bydgoszcz", 3, 2),
        CityData("Olsztyn", 6, 2),
        CityData("Katowice", 5, 8),
        CityData("Rzeszow", 8, 8),
        CityData("Kielce", 6, 6),
        CityData("Torun", 4, 3),
        CityData("Opole", 3, 7),
        CityData("Gdansk", 4, 0),
        CityData("Bialystok", 9, 3),
        CityData("Lublin", 9, 6),
        CityData("Krakow", 6, 9),
        CityData("Poznan", 0, 4),
        CityData("Wroclaw", 0, 7),
    ),
    Country.SPAIN: (
        CityData("Madrid", 4, 4, is_capital=True),
        CityData("Valencia", 7, 5),
        CityData("Seville", 2, 8),
        CityData("Malaga", 3, 8),
        CityData("Zaragoza", 6, 2),
        CityData("Granada", 4, 7),
        CityData("Murcia", 6, 7),
        CityData("Salamanca", 2, 3),
        CityData("Valladolid", 3, 2),
        CityData("Alicante", 7, 6),
        CityData("Bilbao", 3, 0),
        CityData("Barcelona", 8, 0),
        CityData("Vigo", 0, 2),
    ),
    Country.ITALY: (
        CityData("Rome", 4, 5, is_capital=True),
        CityData("Naples", 6, 6),
        CityData("Florence", 4, 3),
        CityData("Bologna", 5, 2),
        CityData("Bari", 8, 6),
        CityData("Palermo", 5, 8),
        CityData("Catania", 7, 8),
        CityData("Pescara", 6, 4),
        CityData("Reggio Calabria", 7, 7),
        CityData("Cagliari", 1, 6),
        CityData("Milan", 3, 0),
        CityData("Turin", 1, 0),
        CityData("Venice", 5, 0),
        CityData("Genoa", 0, 2),
    ),
    Country.RUSSIA: (
        CityData("Moscow", 1, 4, is_capital=True),
        CityData("Novosibirsk", 4, 6),
        CityData("Yekaterinburg", 3, 5),
        CityData("Kazan", 2, 5),
        CityData("Omsk", 3, 6),
        CityData("Samara", 2, 6),
        CityData("Krasnoyarsk", 5, 6),
        CityData("Murmansk", 1, 1),
        CityData("Yakutsk", 7, 3),
        CityData("Norilsk", 5, 2),
        CityData("Magadan", 8, 2),
        CityData("St Petersburg", 0, 2),
        CityData("Rostov-on-Don", 0, 7),
        CityData("Vladivostok", 8, 9),
        CityData("Irkutsk", 5, 9),
        CityData("Khabarovsk", 9, 7),
    ),
    Country.CHINA: (
        CityData("Beijing", 7, 4, is_capital=True),
        CityData("Shenyang", 8, 2),
        CityData("Tianjin", 7, 3),
        CityData("Xian", 5, 5),
        CityData("Chengdu", 3, 6),
        CityData("Chongqing", 4, 6),
        CityData("Wuhan", 6, 6),
        CityData("Nanjing", 8, 5),
        CityData("Hangzhou", 8, 6),
        CityData("Shenzhen", 7, 8),
        CityData("Zhengzhou", 6, 4),
        CityData("Lanzhou", 3, 4),
        CityData("Harbin", 8, 0),
        CityData("Guangzhou", 6, 9),
        CityData("Kunming", 3, 9),
        CityData("Shanghai", 9, 5),
        CityData("Qingdao", 9, 3),
        CityData("Urumqi", 0, 2),
        CityData("Lhasa", 0, 6),
    ),
    Country.INDIA: (
        CityData("New Delhi", 4, 0, is_capital=True),
        CityData("Mumbai", 2, 6),
        CityData("Bangalore", 4, 8),
        CityData("Chennai", 5, 8),
        CityData("Hyderabad", 4, 6),
        CityData("Ahmedabad", 1, 4),
        CityData("Pune", 2, 7),
        CityData("Lucknow", 5, 2),
        CityData("Kanpur", 5, 3),
        CityData("Nagpur", 4, 4),
        CityData("Bhopal", 3, 4),
        CityData("Patna", 7, 3),
        CityData("Kochi", 3, 8),
        CityData("Amritsar", 0, 1),
        CityData("Jaipur", 0, 3),
        CityData("Kolkata", 9, 4),
    ),
    Country.JAPAN: (
        CityData("Tokyo", 6, 4, is_capital=True),
        CityData("Yokohama", 6, 5),
        CityData("Nagoya", 4, 5),
        CityData("Kyoto", 3, 5),
        CityData("Kobe", 2, 5),
        CityData("Sapporo", 8, 1),
        CityData("Sendai", 7, 3),
        CityData("Niigata", 5, 3),
        CityData("Kagoshima", 1, 8),
        CityData("Kitakyushu", 1, 6),
        CityData("Fukuoka", 0, 7),
        CityData("Hiroshima", 0, 6),
        CityData("Osaka", 0, 5),
    ),
    Country.TURKEY: (
        CityData("Ankara", 4, 4, is_capital=True),
        CityData("Bursa", 1, 3),
        CityData("Antalya", 3, 8),
        CityData("Konya", 4, 6),
        CityData("Kayseri", 6, 5),
        CityData("Samsun", 6, 1),
        CityData("Trabzon", 8, 1),
        CityData("Diyarbakir", 8, 6),
        CityData("Eskisehir", 2, 4),
        CityData("Mersin", 5, 8),
        CityData("Istanbul", 0, 2),
        CityData("Izmir", 0, 5),
        CityData("Adana", 5, 9),
        CityData("Gaziantep", 7, 9),
        CityData("Erzurum", 9, 3),
    ),
    Country.SAUDI_ARABIA: (
        CityData("Riyadh", 6, 5, is_capital=True),
        CityData("Jeddah", 2, 6),
        CityData("Mecca", 3, 6),
        CityData("Medina", 2, 4),
        CityData("Abha", 3, 8),
        CityData("Hail", 4, 2),
        CityData("Buraydah", 5, 3),
        CityData("Al Jawf", 4, 1),
        CityData("Najran", 5, 8),
        CityData("Hofuf", 8, 6),
        CityData("Tabuk", 1, 0),
        CityData("Dammam", 9, 4),
    ),
    Country.ISRAEL: (
        CityData("Jerusalem", 9, 4, is_capital=True),
        CityData("Tel Aviv", 2, 3),
        CityData("Beersheba", 4, 6),
        CityData("Ashdod", 2, 5),
        CityData("Netanya", 2, 2),
        CityData("Nazareth", 5, 1),
        CityData("Ashkelon", 1, 6),
        CityData("Dimona", 6, 7),
        CityData("Tiberias", 7, 1),
        CityData("Rishon LeZion", 3, 4),
        CityData("Haifa", 3, 0),
        CityData("Eilat", 5, 9),
    ),
    Country.EGYPT: (
        CityData("Cairo", 5, 2, is_capital=True),
        CityData("Giza", 4, 2),
        CityData("Port Said", 7, 1),
        CityData("Suez", 7, 3),
        CityData("Luxor", 7, 7),
        CityData("Asyut", 5, 5),
        CityData("Hurghada", 8, 5),
        CityData("Siwa", 1, 4),
        CityData("Minya", 5, 4),
        CityData("Tanta", 4, 1),
        CityData("Alexandria", 3, 0),
        CityData("Aswan", 7, 9),
    ),
    Country.SOUTH_AFRICA: (
        CityData("Pretoria", 5, 0, is_capital=True),
        CityData("Cape Town", 1, 8),
        CityData("Durban", 7, 5),
        CityData("Port Elizabeth", 4, 8),
        CityData("Bloemfontein", 4, 4),
        CityData("East London", 6, 7),
        CityData("Polokwane", 6, 1),
        CityData("Kimberley", 3, 4),
        CityData("Upington", 1, 3),
        CityData("Nelspruit", 8, 2),
        CityData("Johannesburg", 6, 0),
    ),
    Country.NIGERIA: (
        CityData("Abuja", 5, 4, is_capital=True),
        CityData("Ibadan", 2, 6),
        CityData("Port Harcourt", 6, 8),
        CityData("Kaduna", 5, 2),
        CityData("Benin City", 4, 7),
        CityData("Enugu", 7, 6),
        CityData("Maiduguri", 8, 1),
        CityData("Jos", 6, 4),
        CityData("Ilorin", 3, 4),
        CityData("Sokoto", 2, 1),
        CityData("Kano", 6, 0),
        CityData("Calabar", 9, 8),
        CityData("Lagos", 0, 7),
    ),
    Country.BRAZIL: (
        CityData("Brasilia", 5, 5, is_capital=True),
        CityData("Sao Paulo", 5, 7),
        CityData("Rio de Janeiro", 7, 7),
        CityData("Salvador", 8, 4),
        CityData("Fortaleza", 8, 2),
        CityData("Recife", 8, 3),
        CityData("Belo Horizonte", 6, 6),
        CityData("Curitiba", 4, 8),
        CityData("Cuiaba", 3, 5),
        CityData("Porto Velho", 1, 4),
        CityData("Goiania", 4, 5),
        CityData("Manaus", 2, 0),
        CityData("Belem", 6, 0),
        CityData("Porto Alegre", 4, 9),
    ),
    Country.ARGENTINA: (
        CityData("Buenos Aires", 6, 4, is_capital=True),
        CityData("Rosario", 5, 3),
        CityData("La Plata", 6, 5),
        CityData("Mar del Plata", 6, 6),
        CityData("Bahia Blanca", 5, 6),
        CityData("Neuquen", 2, 6),
        CityData("Tucuman", 3, 1),
        CityData("Santa Fe", 5, 2),
        CityData("Comodoro Rivadavia", 3, 8),
        CityData("Ushuaia", 4, 8),
        CityData("Salta", 3, 0),
        CityData("Cordoba", 4, 0),
        CityData("Mendoza", 0, 3),
    ),
    Country.AUSTRALIA: (
        CityData("Canberra", 7, 7, is_capital=True),
        CityData("Sydney", 8, 7),
        CityData("Melbourne", 6, 8),
        CityData("Adelaide", 4, 7),
        CityData("Perth", 1, 6),
        CityData("Hobart", 7, 8),
        CityData("Alice Springs", 4, 4),
        CityData("Townsville", 7, 2),
        CityData("Broome", 2, 2),
        CityData("Newcastle", 8, 6),
        CityData("Darwin", 3, 0),
        CityData("Cairns", 7, 0),
        CityData("Brisbane", 9, 5),
    ),
    Country.PORTUGAL: (
        CityData("Lisbon", 9, 5, is_capital=True),
        CityData("Braga", 7, 1),
        CityData("Coimbra", 7, 4),
        CityData("Faro", 7, 8),
        CityData("Aveiro", 6, 3),
        CityData("Setubal", 8, 6),
        CityData("Evora", 8, 5),
        CityData("Leiria", 6, 4),
        CityData("Viseu", 8, 3),
        CityData("Guarda", 8, 2),
        CityData("Porto", 9, 2),
    ),
    Country.NORWAY: (
        CityData("Oslo", 9, 7, is_capital=True),
        CityData("Bergen", 2, 6),
        CityData("Trondheim", 5, 4),
        CityData("Stavanger", 2, 8),
        CityData("Tromso", 7, 1),
        CityData("Bodo", 6, 2),
        CityData("Kristiansand", 4, 8),
        CityData("Drammen", 8, 7),
        CityData("Alesund", 3, 5),
        CityData("Fredrikstad", 8, 8),
    ),
    Country.SWEDEN: (
        CityData("Stockholm", 0, 5, is_capital=True),
        CityData("Gothenburg", 2, 7),
        CityData("Uppsala", 2, 4),
        CityData("Vasteras", 3, 5),
        CityData("Orebro", 4, 6),
        CityData("Linkoping", 5, 7),
        CityData("Norrkoping", 6, 6),
        CityData("Helsingborg", 4, 8),
        CityData("Umea", 6, 2),
        CityData("Lulea", 7, 1),
        CityData("Kiruna", 5, 1),
        CityData("Malmo", 3, 9),
    ),
    Country.FINLAND: (
        CityData("Helsinki", 5, 8, is_capital=True),
        CityData("Espoo", 4, 8),
        CityData("Tampere", 4, 6),
        CityData("Turku", 2, 7),
        CityData("Oulu", 5, 3),
        CityData("Rovaniemi", 5, 1),
        CityData("Jyvaskyla", 5, 5),
        CityData("Kuopio", 7, 4),
        CityData("Vaasa", 2, 4),
        CityData("Lahti", 6, 7),
        CityData("Joensuu", 9, 4),
        CityData("Lappeenranta", 9, 7),
    ),
    Country.UKRAINE: (
        CityData("Kyiv", 5, 2, is_capital=True),
        CityData("Dnipro", 7, 5),
        CityData("Zaporizhzhia", 7, 6),
        CityData("Kherson", 5, 8),
        CityData("Mykolaiv", 4, 7),
        CityData("Vinnytsia", 3, 4),
        CityData("Poltava", 7, 3),
        CityData("Zhytomyr", 3, 2),
        CityData("Ivano-Frankivsk", 1, 5),
        CityData("Kropyvnytskyi", 5, 5),
        CityData("Kharkiv", 9, 3),
        CityData("Sumy", 9, 2),
        CityData("Luhansk", 9, 4),
        CityData("Donetsk", 9, 5),
        CityData("Lviv", 0, 4),
        CityData("Lutsk", 0, 2),
        CityData("Odesa", 4, 9),
        CityData("Mariupol", 8, 9),
        CityData("Chernihiv", 5, 0),
    ),
    Country.DENMARK: (
        CityData("Copenhagen", 8, 9, is_capital=True),
        CityData("Aarhus", 4, 5),
        CityData("Odense", 5, 7),
        CityData("Aalborg", 3, 2),
        CityData("Esbjerg", 2, 7),
        CityData("Randers", 4, 4),
        CityData("Kolding", 3, 7),
        CityData("Horsens", 4, 6),
        CityData("Vejle", 3, 6),
        CityData("Roskilde", 7, 8),
    ),
    Country.NETHERLANDS: (
        CityData("Amsterdam", 9, 3, is_capital=True),
        CityData("Rotterdam", 3, 6),
        CityData("The Hague", 2, 5),
        CityData("Utrecht", 5, 5),
        CityData("Eindhoven", 6, 8),
        CityData("Groningen", 7, 1),
        CityData("Tilburg", 4, 8),
        CityData("Almere", 6, 3),
        CityData("Breda", 3, 8),
        CityData("Nijmegen", 7, 6),
    ),
    Country.BELGIUM: (
        CityData("Brussels", 5, 0, is_capital=True),
        CityData("Antwerp", 4, 2),
        CityData("Ghent", 2, 3),
        CityData("Bruges", 1, 2),
        CityData("Liege", 7, 5),
        CityData("Namur", 5, 6),
        CityData("Charleroi", 4, 7),
        CityData("Leuven", 6, 3),
        CityData("Mons", 3, 7),
        CityData("Arlon", 7, 8),
    ),
    Country.SWITZERLAND: (
        CityData("Bern", 4, 4, is_capital=True),
        CityData("Geneva", 1, 7),
        CityData("Basel", 3, 1),
        CityData("Lausanne", 2, 6),
        CityData("Lucerne", 5, 4),
        CityData("St Gallen", 7, 2),
        CityData("Lugano", 6, 8),
        CityData("Winterthur", 6, 1),
        CityData("Sion", 3, 7),
        CityData("Zurich", 5, 0),
    ),
    Country.AUSTRIA: (
        CityData("Vienna", 7, 4, is_capital=True),
        CityData("Graz", 6, 7),
        CityData("Linz", 5, 3),
        CityData("Salzburg", 3, 4),
        CityData("Innsbruck", 1, 6),
        CityData("Klagenfurt", 5, 8),
        CityData("Villach", 4, 8),
        CityData("Wels", 4, 3),
        CityData("St Polten", 6, 3),
        CityData("Dornbirn", 1, 5),
    ),
    Country.GREECE: (
        CityData("Athens", 6, 9, is_capital=True),
        CityData("Thessaloniki", 5, 2),
        CityData("Patras", 3, 7),
        CityData("Heraklion", 6, 8),
        CityData("Larissa", 4, 4),
        CityData("Volos", 5, 5),
        CityData("Ioannina", 2, 4),
        CityData("Kavala", 7, 1),
        CityData("Alexandroupoli", 8, 1),
        CityData("Kalamata", 3, 8),
    ),
    Country.ESTONIA: (
        CityData("Tallinn", 9, 1, is_capital=True),
        CityData("Tartu", 6, 6),
        CityData("Narva", 8, 3),
        CityData("Parnu", 3, 6),
        CityData("Kohtla-Jarve", 7, 2),
        CityData("Viljandi", 4, 6),
        CityData("Rakvere", 6, 2),
        CityData("Haapsalu", 2, 3),
        CityData("Kuressaare", 1, 6),
        CityData("Voru", 7, 8),
    ),
    Country.LATVIA: (
        CityData("Riga", 0, 4, is_capital=True),
        CityData("Jelgava", 3, 6),
        CityData("Jurmala", 2, 4),
        CityData("Ogre", 4, 4),
        CityData("Tukums", 2, 3),
        CityData("Sigulda", 4, 2),
        CityData("Madona", 6, 4),
        CityData("Kuldiga", 1, 5),
        CityData("Valmiera", 5, 0),
        CityData("Cesis", 6, 0),
        CityData("Daugavpils", 9, 9),
        CityData("Jekabpils", 6, 9),
        CityData("Rezekne", 9, 6),
        CityData("Liepaja", 0, 7),
        CityData("Ventspils", 0, 3),
    ),
    Country.INDONESIA: (
        CityData("Jakarta", 3, 0, is_capital=True),
        CityData("Surabaya", 5, 3),
        CityData("Bandung", 3, 2),
        CityData("Medan", 1, 1),
        CityData("Semarang", 4, 2),
        CityData("Makassar", 6, 4),
        CityData("Palembang", 2, 2),
        CityData("Denpasar", 6, 5),
        CityData("Balikpapan", 6, 2),
        CityData("Jayapura", 8, 4),
    ),
    Country.SOUTH_KOREA: (
        CityData("Seoul", 0, 2, is_capital=True),
        CityData("Busan", 7, 7),
        CityData("Incheon", 1, 2),
        CityData("Daegu", 6, 5),
        CityData("Daejeon", 4, 4),
        CityData("Gwangju", 3, 7),
        CityData("Ulsan", 8, 6),
        CityData("Suwon", 2, 3),
        CityData("Jeonju", 3, 5),
        CityData("Gangneung", 7, 2),
    ),
    Country.IRAN: (
        CityData("Tehran", 4, 2, is_capital=True),
        CityData("Isfahan", 4, 5),
        CityData("Shiraz", 4, 7),
        CityData("Tabriz", 1, 1),
        CityData("Qom", 4, 3),
        CityData("Yazd", 6, 5),
        CityData("Kerman", 7, 6),
        CityData("Hamadan", 2, 3),
        CityData("Arak", 3, 4),
        CityData("Kashan", 5, 4),
        CityData("Urmia", 0, 1),
        CityData("Kermanshah", 0, 4),
        CityData("Ahvaz", 0, 7),
        CityData("Zahedan", 9, 6),
        CityData("Mashhad", 9, 2),
        CityData("Bushehr", 3, 9),
        CityData("Bandar Abbas", 6, 9),
        CityData("Rasht", 3, 0),
        CityData("Gorgan", 6, 0),
    ),
    Country.IRAQ: (
        CityData("Baghdad", 4, 4, is_capital=True),
        CityData("Karbala", 3, 6),
        CityData("Najaf", 3, 7),
        CityData("Hillah", 4, 6),
        CityData("Erbil", 6, 1),
        CityData("Samarra", 4, 2),
        CityData("Kut", 6, 5),
        CityData("Tikrit", 3, 2),
        CityData("Diwaniyah", 5, 7),
        CityData("Sulaymaniyah", 9, 2),
        CityData("Kirkuk", 9, 3),
        CityData("Amarah", 9, 6),
        CityData("Mosul", 4, 0),
        CityData("Dohuk", 5, 0),
        CityData("Zakho", 3, 0),
        CityData("Ramadi", 0, 4),
        CityData("Fallujah", 0, 5),
        CityData("Basra", 8, 9),
        CityData("Nasiriyah", 6, 9),
    ),
    Country.SUDAN: (
        CityData("Khartoum", 5, 3, is_capital=True),
        CityData("Omdurman", 4, 3),
        CityData("Wad Madani", 6, 4),
        CityData("El Obeid", 3, 5),
        CityData("Kosti", 5, 5),
        CityData("Nyala", 2, 6),
        CityData("Kadugli", 4, 7),
        CityData("Sennar", 6, 5),
        CityData("Ed Damazin", 7, 6),
        CityData("Wadi Halfa", 4, 0),
        CityData("Dongola", 3, 0),
        CityData("Atbara", 6, 0),
        CityData("Kassala", 9, 4),
        CityData("Gedaref", 9, 5),
        CityData("Port Sudan", 9, 2),
        CityData("El Geneina", 0, 5),
        CityData("El Fasher", 0, 4),
        CityData("Juba", 6, 9),
        CityData("Malakal", 7, 9),
        CityData("Wau", 4, 9),
    ),
    Country.PAKISTAN: (
        CityData("Islamabad", 6, 2, is_capital=True),
        CityData("Rawalpindi", 6, 1),
        CityData("Faisalabad", 7, 4),
        CityData("Multan", 6, 5),
        CityData("Bahawalpur", 7, 6),
        CityData("Sukkur", 5, 7),
        CityData("Dera Ismail Khan", 4, 4),
        CityData("Larkana", 3, 7),
        CityData("Gujranwala", 8, 3),
        CityData("Quetta", 0, 4),
        CityData("Gwadar", 0, 8),
        CityData("Lahore", 9, 3),
        CityData("Sialkot", 9, 2),
        CityData("Mirpur Khas", 9, 8),
        CityData("Gilgit", 6, 0),
        CityData("Peshawar", 4, 0),
        CityData("Karachi", 3, 9),
        CityData("Hyderabad", 5, 9),
    ),
    Country.LITHUANIA: (
        CityData("Vilnius", 7, 6, is_capital=True),
        CityData("Kaunas", 4, 6),
        CityData("Utena", 7, 3),
        CityData("Taurage", 2, 5),
        CityData("Telsiai", 2, 2),
        CityData("Ukmerge", 6, 4),
        CityData("Jonava", 5, 5),
        CityData("Kedainiai", 4, 4),
        CityData("Siauliai", 4, 0),
        CityData("Panevezys", 6, 0),
        CityData("Mazeikiai", 2, 0),
        CityData("Visaginas", 9, 3),
        CityData("Marijampole", 3, 9),
        CityData("Alytus", 5, 9),
        CityData("Druskininkai", 6, 9),
        CityData("Klaipeda", 0, 4),
        CityData("Palanga", 0, 3),
        CityData("Kretinga", 0, 2),
    ),
})


def cities_of(country: Country) -> tuple[CityData, ...]:
    return COUNTRY_CITIES.get(country, ())


def find_city(country: Country, name: str) -> CityData | None:
    for city in cities_of(country):
        if city.name == name:
            return city
    return None


def capital_of(country: Country) -> CityData | None:
    """The country's capital, or ``None`` when it has no city grid."""

    for city in cities_of(country):
        if city.is_capital:
            return city
    return None


def city_slug(country: Country, name: str) -> str:
    """Identifier used for garrison locations, e.g. ``usa-washington-dc``."""

    return f"{country.value}-{name.lower().replace(' ', '-')}"
