# tehilim_data.py
"""
Monthly Tehilim division: the whole sefer once per Hebrew month.

Each entry is (first_chapter, last_chapter). Chapter 119 is long enough to be
split between the 25th and 26th, so those two days carry verse ranges instead.
"""

CHAPTER_COUNT = 150

# day-of-month → (first chapter, last chapter)
MONTHLY_DIVISION: dict[int, tuple[int, int]] = {
    1:  (1, 9),
    2:  (10, 17),
    3:  (18, 22),
    4:  (23, 28),
    5:  (29, 34),
    6:  (35, 38),
    7:  (39, 43),
    8:  (44, 48),
    9:  (49, 54),
    10: (55, 59),
    11: (60, 65),
    12: (66, 68),
    13: (69, 71),
    14: (72, 76),
    15: (77, 78),
    16: (79, 82),
    17: (83, 87),
    18: (88, 89),
    19: (90, 96),
    20: (97, 103),
    21: (104, 105),
    22: (106, 107),
    23: (108, 112),
    24: (113, 118),
    25: (119, 119),
    26: (119, 119),
    27: (120, 134),
    28: (135, 139),
    29: (140, 144),
    30: (145, 150),
}

# Days that read part of a chapter: day → (chapter, first verse, last verse)
VERSE_SPLITS: dict[int, tuple[int, int, int]] = {
    25: (119, 1, 96),
    26: (119, 97, 176),
}
