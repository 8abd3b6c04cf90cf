"""Country records.  Each country's ``cities`` list is built from :mod:`.cities`."""

COUNTRIES = (
    {"id": 1, "name": "United States", "code": "US", "capital": "Washington, D.C.", "continent": "North America",
     "population": 331002651, "languages": ("English", "Spanish")},
    {"id": 2, "name": "United Kingdom", "code": "GB", "capital": "London", "continent": "Europe",
     "population": 67886011, "languages": ("English", "Welsh", "Scottish Gaelic")},
    {"id": 3, "name": "Japan", "code": "JP", "capital": "Tokyo", "continent": "Asia",
     "population": 126476461, "languages": ("Japanese",)},
    {"id": 4, "name": "France", "code": "FR", "capital": "Paris", "continent": "Europe",
     "population": 65273511, "languages": ("French",)},
    {"id": 5, "name": "Germany", "code": "DE", "capital": "Berlin", "continent": "Europe",
     "population": 83783942, "languages": ("German",)},
    {"id": 6, "name": "Brazil", "code": "BR", "capital": "Brasília", "continent": "South America",
     "population": 212559417, "languages": ("Portuguese",)},
    {"id": 7, "name": "India", "code": "IN", "capital": "New Delhi", "continent": "Asia",
     "population": 1380004385, "languages": ("Hindi", "English", "Bengali", "Telugu", "Marathi")},
    {"id": 8, "name": "China", "code": "CN", "capital": "Beijing", "continent": "Asia",
     "population": 1439323776, "languages": ("Mandarin Chinese", "Cantonese", "Wu", "Min")},
    {"id": 9, "name": "Australia", "code": "AU", "capital": "Canberra", "continent": "Oceania",
     "population": 25499884, "languages": ("English",)},
    {"id": 10, "name": "Canada", "code": "CA", "capital": "Ottawa", "continent": "North America",
     "population": 37742154, "languages": ("English", "French")},
    {"id": 11, "name": "Spain", "code": "ES", "capital": "Madrid", "continent": "Europe",
     "population": 46754778, "languages": ("Spanish", "Catalan", "Galician", "Basque")},
    {"id": 12, "name": "Italy", "code": "IT", "capital": "Rome", "continent": "Europe",
     "population": 60461826, "languages": ("Italian",)},
    {"id": 13, "name": "Mexico", "code": "MX", "capital": "Mexico City", "continent": "North America",
     "population": 128932753, "languages": ("Spanish", "Nahuatl", "Yucatec Maya")},
    {"id": 14, "name": "South Korea", "code": "KR", "capital": "Seoul", "continent": "Asia",
     "population": 51269185, "languages": ("Korean",)},
    {"id": 15, "name": "Russia", "code": "RU", "capital": "Moscow", "continent": "Europe/Asia",
     "population": 145934462, "languages": ("Russian",)},
)
