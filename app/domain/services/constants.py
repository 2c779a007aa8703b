from decimal import Decimal
from types import MappingProxyType

# ---- Recommendation scoring -------------------------------------------------
DEFAULT_RECOMMEND_LIMIT = 6

SAME_COLOR_BONUS = 0.12
COMPATIBLE_COLOR_BONUS = 0.15
SAME_STYLE_BONUS = 0.08
COMPLEMENTARY_BONUS = 0.18

SCORE_DECIMALS = 3

# Directional: keyed by the reference product's colour.
COLOR_MATCHES = MappingProxyType({
    "black": ("white", "grey", "red", "blue", "gold", "silver"),
    "white": ("black", "blue", "red", "beige", "grey"),
    "blue": ("white", "beige", "grey", "black"),
    "navy": ("beige", "white", "grey"),
    "beige": ("navy", "blue", "black", "white", "green"),
    "brown": ("white", "beige", "blue"),
    "grey": ("black", "white", "blue", "red"),
    "red": ("black", "white", "blue"),
    "pink": ("white", "grey", "blue"),
    "green": ("beige", "white", "black"),
    "gold": ("black", "white", "red"),
    "silver": ("black", "white", "blue"),
})

# Directional: keyed by the reference product's category.
DEFAULT_CATEGORY = "default"
COMPLEMENTARY_CATEGORIES = MappingProxyType({
    "shirt": ("pants", "jacket", "shoes"),
    "polo": ("pants", "shoes"),
    "jacket": ("shirt", "pants", "shoes"),
    "pants": ("shirt", "jacket", "shoes"),
    "dress": ("jacket", "shoes"),
    "shoes": ("pants", "shirt", "jacket"),
    DEFAULT_CATEGORY: ("shirt", "pants", "jacket", "shoes"),
})

# Strict opposites only; unisex / missing never excludes.
OPPOSITE_GENDER = MappingProxyType({"men": "women", "women": "men"})

# ---- Seasonal pricing -------------------------------------------------------
SEASON_CHRISTMAS = "christmas"
SEASON_NEWYEAR = "newyear"
SEASON_WINTER = "winter"
SEASON_SUMMER = "summer"
SEASON_DEFAULT = "default"

ALL_SEASONS = (SEASON_CHRISTMAS, SEASON_NEWYEAR, SEASON_WINTER, SEASON_SUMMER, SEASON_DEFAULT)

BASE_DISCOUNT = MappingProxyType({
    SEASON_CHRISTMAS: Decimal("0.30"),
    SEASON_NEWYEAR: Decimal("0.30"),
    SEASON_SUMMER: Decimal("0.15"),
    SEASON_WINTER: Decimal("0.20"),
    SEASON_DEFAULT: Decimal("0.20"),
})
HIGH_PRICE_THRESHOLD = Decimal("1000")
HIGH_PRICE_SURCHARGE = Decimal("0.10")
MAX_DISCOUNT = Decimal("0.45")

# Default season: anything at or above this list price is on sale.
DEFAULT_SEASON_MIN_PRICE = 300

ELIGIBLE_CATEGORIES = MappingProxyType({
    SEASON_WINTER: frozenset({"jacket", "coat", "sweater", "hoodie", "pants"}),
    SEASON_SUMMER: frozenset({"shirt", "tshirt", "polo", "dress", "shorts"}),
    SEASON_CHRISTMAS: frozenset({"dress", "jacket", "shoes", "shirt"}),
    SEASON_NEWYEAR: frozenset({"dress", "jacket", "shoes", "shirt"}),
})
ELIGIBLE_TAG = MappingProxyType({
    SEASON_WINTER: "winter",
    SEASON_SUMMER: "summer",
    SEASON_CHRISTMAS: "party",
    SEASON_NEWYEAR: "party",
})

OFFER_TEXT = MappingProxyType({
    SEASON_WINTER: "Offer: Buy 2 jackets / winter bottoms, get 1 woolen cap free.",
    SEASON_SUMMER: "Offer: Buy 2 summer tops, get 1 basic tee free.",
    SEASON_CHRISTMAS: "Offer: Orders above ₹2500 get a free mini Bluetooth speaker.",
    SEASON_NEWYEAR: "Offer: Orders above ₹3000 get free wireless earbuds.",
    SEASON_DEFAULT: "Limited time price – while stocks last.",
})

SEASON_COPY = MappingProxyType({
    SEASON_CHRISTMAS: (
        "Christmas Sale",
        "Flat 30% off on party outfits + free gift wrapping. Orders over ₹2500 get free mini speaker.",
    ),
    SEASON_NEWYEAR: (
        "New Year Mega Sale",
        "Ring in the new year with 25–35% off. Orders above ₹3001 get bonus wireless earbuds.",
    ),
    SEASON_WINTER: (
        "Winter Warmers",
        "Stay cozy with 20% off jackets & warm bottoms. Extra 10% off items above ₹1000.",
    ),
    SEASON_SUMMER: (
        "Summer Vibes",
        "Cool shirts and dresses with 15–25% off. Lightweight styles get “Buy 2 get 1 free”.",
    ),
    SEASON_DEFAULT: (
        "Today’s Picks",
        "Hand-picked outfits with special prices just for today.",
    ),
})

DEFAULT_SALE_LIMIT = 6
