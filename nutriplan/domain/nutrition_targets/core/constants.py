"""Fixed nutrition constants."""

# Energy density (kcal per gram)
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

# 1 kg of body fat ~= 7700 kcal
KCAL_PER_KG_FAT = 7700

DEFAULT_CALORIE_DEFICIT = 500.0
PROTEIN_G_PER_KG = 2.0
FAT_CALORIE_SHARE = 0.27

# Share of total weight lost that is fat mass
FAT_SHARE_OF_WEIGHT_LOSS = 0.7

DEFAULT_BODY_FAT_PERCENT = 20.0
DEFAULT_TARGET_BODY_FAT_PERCENT = 13.0

# Inclusive (min, max) ranges for body metrics
WEIGHT_RANGE_KG = (30.0, 300.0)
HEIGHT_RANGE_CM = (100.0, 250.0)
AGE_RANGE_YEARS = (15, 100)
BODY_FAT_RANGE_PERCENT = (3.0, 60.0)
