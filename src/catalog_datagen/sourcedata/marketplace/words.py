"""
Word lists used to build synthetic slugs and titles.
"""

ADJECTIVES = [
    "abstract", "ancient", "artistic", "beautiful", "bold", "bright", "classic", "clean",
    "colorful", "creative", "cute", "dark", "decorative", "delicate", "elegant", "fancy",
    "festive", "floral", "fresh", "fun", "geometric", "golden", "gorgeous", "graceful",
    "handmade", "happy", "luxury", "magical", "minimal", "modern", "natural", "organic",
    "ornate", "playful", "premium", "pretty", "retro", "rustic", "seasonal", "simple",
    "stylish", "trendy", "unique", "urban", "vibrant", "vintage", "wild", "wonderful",
]

NOUNS = [
    "art", "background", "badge", "banner", "border", "bouquet", "card", "celebration",
    "collection", "decoration", "design", "drawing", "element", "emblem", "flower", "frame",
    "graphic", "icon", "illustration", "image", "label", "layout", "logo", "ornament",
    "pattern", "poster", "print", "set", "shape", "sign", "silhouette", "sketch",
    "sticker", "style", "symbol", "template", "texture", "theme", "vector", "wallpaper",
    "watercolor", "wreath", "bundle", "pack", "kit", "clipart", "mockup", "scene",
]

SUBCATEGORY_PREFIXES = [
    "Modern", "Vintage", "Classic", "Premium", "Professional",
    "Creative", "Elegant", "Bold", "Minimal", "Decorative",
]

SUBCATEGORY_SUFFIXES = [
    "Designs", "Templates", "Graphics", "Elements", "Patterns",
    "Styles", "Collections", "Sets", "Packs", "Kits",
]

PROMO_TYPES = ["discount", "featured", "bundle", "seasonal", "flash-sale"]

PROMO_STATUSES = ["active", "scheduled", "expired", "paused"]
