"""
Diary Service Constants

Contains the constants used by the calorie estimation and daily summary services.
"""

# MET calorie estimate: calories = MET * body mass (kg) * hours.
# A fixed reference mass is used instead of the user's own weight.
REFERENCE_BODY_MASS_KG = 70

# Strength entries without a duration: minutes = sets * reps * MINUTES_PER_REP
MINUTES_PER_REP = 0.5

# Summary meal buckets, in output order. The "snack" meal type feeds "snacks".
MEAL_BUCKETS = ("breakfast", "lunch", "dinner", "snacks")
MEAL_TYPE_TO_BUCKET = {
    "breakfast": "breakfast",
    "lunch": "lunch",
    "dinner": "dinner",
    "snack": "snacks",
}

# Rounding for summary output
SUMMARY_DECIMALS = 2
