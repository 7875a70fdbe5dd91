# orchos_tzadikim_data.py
"""
Built-in Orchos Tzadikim table for the daily gate rotation.

Same shape as the parsed full-text file: a list of {"title", "content"}
sections, the introduction first. The sefer has 28 gates; the longest,
שער התורה, is read over two days, which with the introduction gives one
section per day of a 30-day month.

"content" here is a short description of the gate. A file with the full
text can replace it (see the integration's data directory).
"""

SEFER_NAME = "אורחות צדיקים"

# (gate number, topic, description)
GATES: list[tuple[int, str, str]] = [
    (1,  "הגאוה",       "הגאוה מידה רעה מאד, וראוי להתרחק ממנה עד הקצה האחר."),
    (2,  "הענוה",       "הענוה היא שורש לכל המידות הטובות ומביאה את האדם ליראת שמים."),
    (3,  "הבושה",       "הבושה מונעת את האדם מן החטא ומביאה אותו לידי יראה."),
    (4,  "העזות",       "עזות הפנים מביאה לידי חוצפה ולפריקת עול."),
    (5,  "האהבה",       "האהבה כוללת אהבת הבורא ואהבת הבריות, ובה תלויים מעשים רבים."),
    (6,  "השנאה",       "השנאה מחריבה את הלב, אך יש שנאה ראויה לרשעה ולמעשים הרעים."),
    (7,  "הרחמים",      "הרחמים מידה טובה, והמרחם על הבריות מרחמים עליו מן השמים."),
    (8,  "האכזריות",    "האכזריות מידה רעה, וראוי להשתמש בה רק נגד הרשעים ויצר הרע."),
    (9,  "השמחה",       "השמחה בעבודת הבורא היא מידה עליונה, ושמחת הבלי העולם מביאה לידי חטא."),
    (10, "הדאגה",       "הדאגה על עסקי העולם מחלישה את הגוף, ודאגת החטאים מביאה לתשובה."),
    (11, "החרטה",       "החרטה על המעשים הרעים היא פתח התשובה."),
    (12, "הכעס",        "הכעס מידה רעה מאד, והכועס כאילו עובד עבודה זרה."),
    (13, "הרצון",       "הרצון הטוב ומאור הפנים מקרבים את הבריות ומביאים שלום."),
    (14, "הקנאה",       "הקנאה מוציאה את האדם מן העולם, מלבד קנאת סופרים שמרבה חכמה."),
    (15, "הזריזות",     "הזריזות במצוות ובמעשים הטובים היא מידה משובחת."),
    (16, "העצלות",      "העצלות מונעת את האדם מעבודת הבורא וממלאכתו."),
    (17, "הנדיבות",     "הנדיבות מידה טובה, לתת בעין יפה ובלב שלם."),
    (18, "הכילות",      "הכילות מידה מגונה, והכילי מונע טוב מבעליו."),
    (19, "הזכירה",      "הזכירה כלי לעבודת הבורא: לזכור את חסדיו ואת יום המיתה."),
    (20, "השכחה",       "השכחה מביאה לידי חטא, וראוי להישמר ממנה בדברי תורה ומצוות."),
    (21, "השתיקה",      "השתיקה סייג לחכמה, ושומר פיו שומר מצרות נפשו."),
    (22, "השקר",        "השקר מידה רעה מאד, והדובר שקרים לא יכון לנגד עיני הבורא."),
    (23, "האמת",        "האמת חותמו של הקדוש ברוך הוא, ועליה העולם עומד."),
    (24, "החנופה",      "החנופה מידה רעה, והמחניף לרשע נענש עמו."),
    (25, "לשון הרע",    "לשון הרע שקול כנגד עבירות חמורות, וראוי להתרחק ממנו ומשמיעתו."),
    (26, "התשובה",      "התשובה מועילה לכל החטאים, ודרכיה עזיבת החטא, החרטה והווידוי."),
    (27, "התורה",       "התורה היא יסוד הכל, ובה ישיג האדם את כל המידות הטובות."),
    (28, "יראת שמים",   "יראת שמים היא תכלית כל המידות, ובה נגמר הספר."),
]

# Read over two days
SPLIT_GATE = 27

INTRODUCTION: dict[str, str] = {
    "title": "הקדמה",
    "content": "הקדמת הספר: המידות הן שורש לכל המעשים, ובתיקונן תלויה עבודת האדם.",
}

PART_SUFFIXES = ("(חלק א)", "(חלק ב)")
