"""Hard-coded site content used before anything has been saved."""
import copy

MENU_CATEGORIES = ("Food", "Drinks", "Snacks", "Cocktails", "Desserts", "Other")

BLOCK_TYPES = ("heading", "text", "divider", "quote")

NEWS_NAV_LINK = {"label": "Nieuws", "path": "/nieuws"}
RULES_NAV_LINK = {"label": "Spelregels", "path": "/spelregels"}

_DEFAULT_CONTENT = {
    "heroTitle": "Snooker Pool Centrum",
    "heroSubtitle": "Enjoy a modern pool lounge, specialty drinks, and a vibrant social scene.",
    "infoTitle": "About Our Cafe",
    "infoText": (
        "Lorem ipsum dolor sit amet, consectetur adipiscing elit. "
        "Lorem ipsum dolor sit amet, consectetur adipiscing elit."
    ),
    "mainColor": "#00b894",
    "accentColor": "#232526",
    "backgroundImages": [
        "https://dynamic-media-cdn.tripadvisor.com/media/photo-o/12/bc/33/4e/getlstd-property-photo.jpg?w=1200&h=-1&s=1",
        "https://images.socialdeal.nl/bedrijf/pool-cafe-hart-van-utrecht-19062608564682.jpg",
        "https://m-en.bredastudentapp.com/uploads/image/5c8252172a5ab06d94dfcd1e-large.jpg",
    ],
    "logoText": "SPC - Snooker Pool Centrum",
    "opening": [
        {"d": "Maandag", "v": "Gesloten"},
        {"d": "Dinsdag", "v": "18:00 – 23:00"},
        {"d": "Woensdag", "v": "13:00 – 24:00"},
        {"d": "Donderdag", "v": "13:00 – 24:00"},
        {"d": "Vrijdag", "v": "18:00 – 01:00"},
        {"d": "Zaterdag", "v": "13:00 – 01:00"},
        {"d": "Zondag", "v": "13:00 – 18:00"},
    ],
    "rates": [
        {"label": "Pool", "price": "€15 / uur"},
        {"label": "Snooker", "price": "€15 / uur"},
        {"label": "Biljart (groot)", "price": "€10 / uur"},
        {"label": "Biljart (klein)", "price": "€8 / uur"},
    ],
    "email": "spccapelle010@gmail.com",
    "tel": "010-4585733",
    "kvk": "89548477",
    "address": "Marsdiep 2, 2904 ES Capelle a/d IJssel",
    "payment": "Pin of contant",
    "navLinks": [
        {"label": "Home", "path": "/"},
        {"label": "Menu", "path": "/menu"},
        {"label": "Contact", "path": "/contact"},
        dict(NEWS_NAV_LINK),
        dict(RULES_NAV_LINK),
    ],
    "pages": [
        {
            "id": "home",
            "title": "Home",
            "path": "/",
            "heroTitle": "Welcome to SPC",
            "heroSubtitle": "Enjoy a modern pool lounge, specialty drinks, and a vibrant social scene.",
            "blocks": [],
        },
        {
            "id": "menu",
            "title": "Menu",
            "path": "/menu",
            "heroTitle": "Menu",
            "heroSubtitle": "Our delicious menu will be here.",
            "blocks": [],
        },
        {
            "id": "contact",
            "title": "Contact",
            "path": "/contact",
            "heroTitle": "Contact Us",
            "heroSubtitle": "Contact form and info.",
            "blocks": [],
        },
    ],
    "menu": [],
}

# Scalar fields replaced by their default when missing or not a string.
STRING_FIELDS = (
    "heroTitle",
    "heroSubtitle",
    "infoTitle",
    "infoText",
    "mainColor",
    "accentColor",
    "logoText",
    "email",
    "tel",
    "kvk",
    "address",
    "payment",
)

# Collections replaced by their default when missing or not a list.
LIST_FIELDS = ("backgroundImages", "navLinks", "opening", "rates", "pages", "menu")


def default_content() -> dict:
    """Fresh copy of the default aggregate; callers may change it freely."""
    return copy.deepcopy(_DEFAULT_CONTENT)


def default_value(field: str):
    return copy.deepcopy(_DEFAULT_CONTENT[field])
