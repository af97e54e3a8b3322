"""
Top-level marketplace categories with their share of the product catalog.

Percentages are the probability mass used when assigning a generated
product to a top-level category.
"""

CATEGORIES = [
    {"CategoryID": 553, "Slug": "Graphics", "Percentage": 0.9320},
    {"CategoryID": 23, "Slug": "Fonts", "Percentage": 0.0210},
    {"CategoryID": 26, "Slug": "Crafts", "Percentage": 0.0185},
    {"CategoryID": 735, "Slug": "Embroidery", "Percentage": 0.0098},
    {"CategoryID": 2245, "Slug": "Laser Cutting", "Percentage": 0.0091},
    {"CategoryID": 546, "Slug": "Bundles", "Percentage": 0.0065},
    {"CategoryID": 1850, "Slug": "3D SVG", "Percentage": 0.0029},
    {"CategoryID": 2244, "Slug": "3D Printing", "Percentage": 0.0003},
    {"CategoryID": 2246, "Slug": "Knitting", "Percentage": 0.0002},
]
