"""City rows: ``(id, name, population, is_capital, country_id)``.

Country names are joined in from :mod:`.countries` when the dataset is
loaded.
"""

CITY_FIELDS = ("id", "name", "population", "is_capital", "country_id")

CITIES = (
    (101, "New York", 8336817, False, 1),
    (102, "Los Angeles", 3979576, False, 1),
    (103, "Chicago", 2693976, False, 1),
    (104, "Washington, D.C.", 705749, True, 1),
    (105, "San Francisco", 873965, False, 1),
    (201, "London", 9002488, True, 2),
    (202, "Manchester", 547627, False, 2),
    (203, "Birmingham", 1141816, False, 2),
    (204, "Edinburgh", 524930, False, 2),
    (205, "Liverpool", 498042, False, 2),
    (301, "Tokyo", 13960000, True, 3),
    (302, "Osaka", 2725006, False, 3),
    (303, "Kyoto", 1475183, False, 3),
    (304, "Yokohama", 3748071, False, 3),
    (305, "Nagoya", 2327557, False, 3),
    (401, "Paris", 2165423, True, 4),
    (402, "Marseille", 869815, False, 4),
    (403, "Lyon", 513275, False, 4),
    (404, "Nice", 340017, False, 4),
    (405, "Toulouse", 471941, False, 4),
    (501, "Berlin", 3769495, True, 5),
    (502, "Munich", 1471508, False, 5),
    (503, "Hamburg", 1852478, False, 5),
    (504, "Frankfurt", 753056, False, 5),
    (505, "Cologne", 1085664, False, 5),
    (601, "Brasília", 3015268, True, 6),
    (602, "São Paulo", 12325232, False, 6),
    (603, "Rio de Janeiro", 6748000, False, 6),
    (604, "Salvador", 2886698, False, 6),
    (605, "Fortaleza", 2686612, False, 6),
    (701, "New Delhi", 32941000, True, 7),
    (702, "Mumbai", 20411000, False, 7),
    (703, "Bangalore", 12765000, False, 7),
    (704, "Kolkata", 14850000, False, 7),
    (705, "Chennai", 10971000, False, 7),
    (801, "Beijing", 21540000, True, 8),
    (802, "Shanghai", 27058000, False, 8),
    (803, "Guangzhou", 15300000, False, 8),
    (804, "Shenzhen", 17560000, False, 8),
    (805, "Chengdu", 16580000, False, 8),
    (901, "Canberra", 431380, True, 9),
    (902, "Sydney", 5312000, False, 9),
    (903, "Melbourne", 5078000, False, 9),
    (904, "Brisbane", 2560000, False, 9),
    (905, "Perth", 2125000, False, 9),
    (1001, "Ottawa", 1017449, True, 10),
    (1002, "Toronto", 2930000, False, 10),
    (1003, "Vancouver", 675218, False, 10),
    (1004, "Montreal", 1780000, False, 10),
    (1005, "Calgary", 1336000, False, 10),
    (1101, "Madrid", 3223334, True, 11),
    (1102, "Barcelona", 1620343, False, 11),
    (1103, "Valencia", 791413, False, 11),
    (1104, "Seville", 688711, False, 11),
    (1105, "Bilbao", 345821, False, 11),
    (1201, "Rome", 2872800, True, 12),
    (1202, "Milan", 1396000, False, 12),
    (1203, "Naples", 967069, False, 12),
    (1204, "Turin", 875698, False, 12),
    (1205, "Florence", 382258, False, 12),
    (1301, "Mexico City", 21581000, True, 13),
    (1302, "Guadalajara", 5268642, False, 13),
    (1303, "Monterrey", 5341171, False, 13),
    (1304, "Cancún", 888797, False, 13),
    (1305, "Tijuana", 1922523, False, 13),
    (1401, "Seoul", 9776000, True, 14),
    (1402, "Busan", 3449000, False, 14),
    (1403, "Incheon", 2954000, False, 14),
    (1404, "Daegu", 2461000, False, 14),
    (1405, "Daejeon", 1539000, False, 14),
    (1501, "Moscow", 12500000, True, 15),
    (1502, "Saint Petersburg", 5398000, False, 15),
    (1503, "Novosibirsk", 1625000, False, 15),
    (1504, "Yekaterinburg", 1493000, False, 15),
    (1505, "Kazan", 1257000, False, 15),
)
