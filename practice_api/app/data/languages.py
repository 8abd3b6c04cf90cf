"""Language records with the countries they are spoken in."""

LANGUAGES = (
    {"id": 1, "name": "English", "native_name": "English", "iso6391": "en", "speakers": 1500000000,
     "countries": ["United States", "United Kingdom", "Canada", "Australia", "India"], "country_ids": [1, 2, 7, 9, 10]},
    {"id": 2, "name": "Spanish", "native_name": "Español", "iso6391": "es", "speakers": 580000000,
     "countries": ["Spain", "Mexico", "United States"], "country_ids": [1, 11, 13]},
    {"id": 3, "name": "Mandarin Chinese", "native_name": "普通话", "iso6391": "zh", "speakers": 1100000000,
     "countries": ["China"], "country_ids": [8]},
    {"id": 4, "name": "Hindi", "native_name": "हिन्दी", "iso6391": "hi", "speakers": 600000000,
     "countries": ["India"], "country_ids": [7]},
    {"id": 5, "name": "French", "native_name": "Français", "iso6391": "fr", "speakers": 280000000,
     "countries": ["France", "Canada"], "country_ids": [4, 10]},
    {"id": 6, "name": "Japanese", "native_name": "日本語", "iso6391": "ja", "speakers": 125000000,
     "countries": ["Japan"], "country_ids": [3]},
    {"id": 7, "name": "German", "native_name": "Deutsch", "iso6391": "de", "speakers": 132000000,
     "countries": ["Germany"], "country_ids": [5]},
    {"id": 8, "name": "Portuguese", "native_name": "Português", "iso6391": "pt", "speakers": 260000000,
     "countries": ["Brazil"], "country_ids": [6]},
    {"id": 9, "name": "Russian", "native_name": "Русский", "iso6391": "ru", "speakers": 258000000,
     "countries": ["Russia"], "country_ids": [15]},
    {"id": 10, "name": "Korean", "native_name": "한국어", "iso6391": "ko", "speakers": 81000000,
     "countries": ["South Korea"], "country_ids": [14]},
    {"id": 11, "name": "Italian", "native_name": "Italiano", "iso6391": "it", "speakers": 85000000,
     "countries": ["Italy"], "country_ids": [12]},
    {"id": 12, "name": "Bengali", "native_name": "বাংলা", "iso6391": "bn", "speakers": 270000000,
     "countries": ["India"], "country_ids": [7]},
    {"id": 13, "name": "Telugu", "native_name": "తెలుగు", "iso6391": "te", "speakers": 95000000,
     "countries": ["India"], "country_ids": [7]},
    {"id": 14, "name": "Marathi", "native_name": "मराठी", "iso6391": "mr", "speakers": 83000000,
     "countries": ["India"], "country_ids": [7]},
    {"id": 15, "name": "Catalan", "native_name": "Català", "iso6391": "ca", "speakers": 10000000,
     "countries": ["Spain"], "country_ids": [11]},
    {"id": 16, "name": "Galician", "native_name": "Galego", "iso6391": "gl", "speakers": 2400000,
     "countries": ["Spain"], "country_ids": [11]},
    {"id": 17, "name": "Basque", "native_name": "Euskara", "iso6391": "eu", "speakers": 750000,
     "countries": ["Spain"], "country_ids": [11]},
    {"id": 18, "name": "Welsh", "native_name": "Cymraeg", "iso6391": "cy", "speakers": 880000,
     "countries": ["United Kingdom"], "country_ids": [2]},
    {"id": 19, "name": "Scottish Gaelic", "native_name": "Gàidhlig", "iso6391": "gd", "speakers": 57000,
     "countries": ["United Kingdom"], "country_ids": [2]},
    {"id": 20, "name": "Cantonese", "native_name": "粵語", "iso6391": "yue", "speakers": 85000000,
     "countries": ["China"], "country_ids": [8]},
    {"id": 21, "name": "Wu", "native_name": "吳語", "iso6391": "wuu", "speakers": 81000000,
     "countries": ["China"], "country_ids": [8]},
    {"id": 22, "name": "Min", "native_name": "閩語", "iso6391": "nan", "speakers": 70000000,
     "countries": ["China"], "country_ids": [8]},
    {"id": 23, "name": "Nahuatl", "native_name": "Nāhuatl", "iso6391": "nah", "speakers": 1700000,
     "countries": ["Mexico"], "country_ids": [13]},
    {"id": 24, "name": "Yucatec Maya", "native_name": "Màaya T'àan", "iso6391": "yua", "speakers": 800000,
     "countries": ["Mexico"], "country_ids": [13]},
)
