"""
Derived profile attributes computed from a birthday.
"""
from datetime import date

# (sign, (start month, start day), (end month, end day)), both ends inclusive.
# Capricorn wraps around the new year.
HOROSCOPE_RANGES = [
    ("Aries", (3, 21), (4, 19)),
    ("Taurus", (4, 20), (5, 20)),
    ("Gemini", (5, 21), (6, 20)),
    ("Cancer", (6, 21), (7, 22)),
    ("Leo", (7, 23), (8, 22)),
    ("Virgo", (8, 23), (9, 22)),
    ("Libra", (9, 23), (10, 22)),
    ("Scorpio", (10, 23), (11, 21)),
    ("Sagittarius", (11, 22), (12, 21)),
    ("Capricorn", (12, 22), (1, 19)),
    ("Aquarius", (1, 20), (2, 18)),
    ("Pisces", (2, 19), (3, 20)),
]

# Indexed by (year - 1900) % 12, so 1900 maps to Monkey.
CHINESE_ZODIAC_CYCLE = [
    "Monkey",
    "Rooster",
    "Dog",
    "Pig",
    "Rat",
    "Ox",
    "Tiger",
    "Rabbit",
    "Dragon",
    "Snake",
    "Horse",
    "Goat",
]


def calculate_horoscope(birthday: date) -> str:
    """Western zodiac sign for a birthday (month and day only)."""
    key = (birthday.month, birthday.day)
    for sign, start, end in HOROSCOPE_RANGES:
        if start <= end:
            if start <= key <= end:
                return sign
        elif key >= start or key <= end:
            return sign
    # Unreachable: the ranges cover every day of the year
    raise ValueError(f"No horoscope sign for {birthday.isoformat()}")


def calculate_chinese_zodiac(birthday: date) -> str:
    """Chinese zodiac animal for the birth year."""
    return CHINESE_ZODIAC_CYCLE[(birthday.year - 1900) % 12]
