"""
Marketplace subcategories with their share within the parent category.

Only the most common subcategories are listed; subcategories found in the
store but missing here are weighted by the loader (see
``catalog_datagen.generators.sampling.SubcategoryPicker``).
"""

SUBCATEGORIES = [
    {"CategoryID": 1804, "Slug": "Graphics", "ParentCategoryID": 553, "Percentage": 0.2723225},
    {"CategoryID": 638, "Slug": "Crafts", "ParentCategoryID": 26, "Percentage": 0.1364864},
    {"CategoryID": 602, "Slug": "Illustrations", "ParentCategoryID": 553, "Percentage": 0.1073622},
    {"CategoryID": 1281, "Slug": "T-shirt Designs", "ParentCategoryID": 553, "Percentage": 0.0964248},
    {"CategoryID": 580, "Slug": "Icons", "ParentCategoryID": 553, "Percentage": 0.0459113},
    {"CategoryID": 610, "Slug": "Print Templates", "ParentCategoryID": 553, "Percentage": 0.0429839},
    {"CategoryID": 1841, "Slug": "Transparent PNGs", "ParentCategoryID": 553, "Percentage": 0.0347678},
    {"CategoryID": 615, "Slug": "Logos", "ParentCategoryID": 553, "Percentage": 0.0260298},
    {"CategoryID": 608, "Slug": "Backgrounds", "ParentCategoryID": 553, "Percentage": 0.0245767},
    {"CategoryID": 1826, "Slug": "Patterns", "ParentCategoryID": 553, "Percentage": 0.0211616},
    {"CategoryID": 604, "Slug": "Patterns", "ParentCategoryID": 553, "Percentage": 0.0203491},
    {"CategoryID": 1854, "Slug": "AI Illustrations", "ParentCategoryID": 553, "Percentage": 0.0192229},
    {"CategoryID": 634, "Slug": "Tumbler Wraps", "ParentCategoryID": 26, "Percentage": 0.0166457},
    {"CategoryID": 897, "Slug": "KDP Interiors", "ParentCategoryID": 553, "Percentage": 0.0086374},
    {"CategoryID": 609, "Slug": "Graphic Templates", "ParentCategoryID": 553, "Percentage": 0.0083662},
    {"CategoryID": 1853, "Slug": "AI Graphics", "ParentCategoryID": 553, "Percentage": 0.0080051},
    {"CategoryID": 605, "Slug": "Product Mockups", "ParentCategoryID": 553, "Percentage": 0.0069095},
    {"CategoryID": 8, "Slug": "Script & Handwritten", "ParentCategoryID": 23, "Percentage": 0.0061043},
    {"CategoryID": 2111, "Slug": "T-Shirts", "ParentCategoryID": 553, "Percentage": 0.0052110},
    {"CategoryID": 1856, "Slug": "AI Transparent PNGs", "ParentCategoryID": 553, "Percentage": 0.0051267},
    {"CategoryID": 908, "Slug": "Coloring Pages & Books Adults", "ParentCategoryID": 553, "Percentage": 0.0037459},
    {"CategoryID": 606, "Slug": "Textures", "ParentCategoryID": 553, "Percentage": 0.0036388},
    {"CategoryID": 1829, "Slug": "AI Generated", "ParentCategoryID": 553, "Percentage": 0.0034918},
    {"CategoryID": 1858, "Slug": "Coloring Pages", "ParentCategoryID": 553, "Percentage": 0.0032232},
    {"CategoryID": 611, "Slug": "Product Mockups", "ParentCategoryID": 553, "Percentage": 0.0029800},
    {"CategoryID": 12, "Slug": "Display", "ParentCategoryID": 23, "Percentage": 0.0029284},
    {"CategoryID": 584, "Slug": "Layer Styles", "ParentCategoryID": 553, "Percentage": 0.0029192},
    {"CategoryID": 907, "Slug": "Coloring Pages & Books Kids", "ParentCategoryID": 553, "Percentage": 0.0027455},
    {"CategoryID": 1833, "Slug": "Sketches", "ParentCategoryID": 553, "Percentage": 0.0024499},
    {"CategoryID": 906, "Slug": "Coloring Pages & Books", "ParentCategoryID": 553, "Percentage": 0.0019535},
    {"CategoryID": 2112, "Slug": "Hoodies & Sweatshirts", "ParentCategoryID": 553, "Percentage": 0.0018835},
    {"CategoryID": 1280, "Slug": "Social Media Templates", "ParentCategoryID": 553, "Percentage": 0.0016599},
    {"CategoryID": 1857, "Slug": "AI Patterns", "ParentCategoryID": 553, "Percentage": 0.0013482},
    {"CategoryID": 2031, "Slug": "Decorative Elements", "ParentCategoryID": 553, "Percentage": 0.0011899},
    {"CategoryID": 2167, "Slug": "Mugs & Cups", "ParentCategoryID": 553, "Percentage": 0.0011692},
    {"CategoryID": 612, "Slug": "Websites", "ParentCategoryID": 553, "Percentage": 0.0011454},
    {"CategoryID": 67, "Slug": "Designs & Drawings", "ParentCategoryID": 553, "Percentage": 0.0011122},
    {"CategoryID": 617, "Slug": "Presentation Templates", "ParentCategoryID": 553, "Percentage": 0.0010494},
    {"CategoryID": 13, "Slug": "Sans Serif", "ParentCategoryID": 23, "Percentage": 0.0010465},
    {"CategoryID": 2169, "Slug": "Frames & Posters", "ParentCategoryID": 553, "Percentage": 0.0010009},
    {"CategoryID": 581, "Slug": "Add-ons", "ParentCategoryID": 553, "Percentage": 0.0009821},
    {"CategoryID": 582, "Slug": "Actions & Presets", "ParentCategoryID": 553, "Percentage": 0.0009456},
    {"CategoryID": 2117, "Slug": "Baby & Kids Clothing", "ParentCategoryID": 553, "Percentage": 0.0008957},
    {"CategoryID": 2357, "Slug": "Wall Decor", "ParentCategoryID": 26, "Percentage": 0.0008954},
    {"CategoryID": 2223, "Slug": "Christmas & New Year", "ParentCategoryID": 553, "Percentage": 0.0008319},
    {"CategoryID": 1145, "Slug": "KDP Keywords", "ParentCategoryID": 553, "Percentage": 0.0008303},
    {"CategoryID": 2365, "Slug": "Winter & Christmas", "ParentCategoryID": 553, "Percentage": 0.0007974},
    {"CategoryID": 14, "Slug": "Serif", "ParentCategoryID": 23, "Percentage": 0.0007710},
    {"CategoryID": 27, "Slug": "Christmas", "ParentCategoryID": 26, "Percentage": 0.0006991},
    {"CategoryID": 583, "Slug": "Brushes", "ParentCategoryID": 553, "Percentage": 0.0006624},
    {"CategoryID": 2370, "Slug": "Halloween", "ParentCategoryID": 553, "Percentage": 0.0006500},
    {"CategoryID": 2371, "Slug": "Easter", "ParentCategoryID": 553, "Percentage": 0.0006200},
    {"CategoryID": 2372, "Slug": "Valentines Day", "ParentCategoryID": 553, "Percentage": 0.0005800},
    {"CategoryID": 2373, "Slug": "Thanksgiving", "ParentCategoryID": 553, "Percentage": 0.0005500},
    {"CategoryID": 2374, "Slug": "Birthday", "ParentCategoryID": 553, "Percentage": 0.0005200},
    {"CategoryID": 2375, "Slug": "Wedding", "ParentCategoryID": 553, "Percentage": 0.0004900},
    {"CategoryID": 2376, "Slug": "Baby Shower", "ParentCategoryID": 553, "Percentage": 0.0004600},
    {"CategoryID": 2377, "Slug": "Graduation", "ParentCategoryID": 553, "Percentage": 0.0004300},
    {"CategoryID": 2378, "Slug": "Summer", "ParentCategoryID": 553, "Percentage": 0.0004000},
    {"CategoryID": 2379, "Slug": "Spring", "ParentCategoryID": 553, "Percentage": 0.0003800},
    {"CategoryID": 2380, "Slug": "Fall", "ParentCategoryID": 553, "Percentage": 0.0003600},
    {"CategoryID": 2381, "Slug": "Back to School", "ParentCategoryID": 553, "Percentage": 0.0003400},
    {"CategoryID": 2382, "Slug": "Sports", "ParentCategoryID": 553, "Percentage": 0.0003200},
    {"CategoryID": 2383, "Slug": "Music", "ParentCategoryID": 553, "Percentage": 0.0003000},
    {"CategoryID": 2384, "Slug": "Food & Drink", "ParentCategoryID": 553, "Percentage": 0.0002800},
    {"CategoryID": 2385, "Slug": "Animals", "ParentCategoryID": 553, "Percentage": 0.0002600},
    {"CategoryID": 2386, "Slug": "Nature", "ParentCategoryID": 553, "Percentage": 0.0002400},
    {"CategoryID": 2387, "Slug": "Travel", "ParentCategoryID": 553, "Percentage": 0.0002200},
    {"CategoryID": 2388, "Slug": "Business", "ParentCategoryID": 553, "Percentage": 0.0002000},
    {"CategoryID": 2389, "Slug": "Education", "ParentCategoryID": 553, "Percentage": 0.0001800},
    {"CategoryID": 2390, "Slug": "Technology", "ParentCategoryID": 553, "Percentage": 0.0001600},
    {"CategoryID": 637, "Slug": "Paper Crafts", "ParentCategoryID": 26, "Percentage": 0.0001500},
    {"CategoryID": 639, "Slug": "Sewing & Quilting", "ParentCategoryID": 26, "Percentage": 0.0001400},
    {"CategoryID": 640, "Slug": "Jewelry Making", "ParentCategoryID": 26, "Percentage": 0.0001300},
    {"CategoryID": 641, "Slug": "Scrapbooking", "ParentCategoryID": 26, "Percentage": 0.0001200},
    {"CategoryID": 642, "Slug": "Card Making", "ParentCategoryID": 26, "Percentage": 0.0001100},
    {"CategoryID": 2391, "Slug": "Stickers & Labels", "ParentCategoryID": 553, "Percentage": 0.0001000},
    {"CategoryID": 2392, "Slug": "Banners & Signs", "ParentCategoryID": 553, "Percentage": 0.0000950},
    {"CategoryID": 2393, "Slug": "Invitations", "ParentCategoryID": 553, "Percentage": 0.0000900},
    {"CategoryID": 2394, "Slug": "Greeting Cards", "ParentCategoryID": 553, "Percentage": 0.0000850},
    {"CategoryID": 2395, "Slug": "Planners & Journals", "ParentCategoryID": 553, "Percentage": 0.0000800},
    {"CategoryID": 2396, "Slug": "Calendars", "ParentCategoryID": 553, "Percentage": 0.0000750},
    {"CategoryID": 2397, "Slug": "Bookmarks", "ParentCategoryID": 553, "Percentage": 0.0000700},
    {"CategoryID": 2398, "Slug": "Gift Tags", "ParentCategoryID": 553, "Percentage": 0.0000650},
    {"CategoryID": 2399, "Slug": "Photo Frames", "ParentCategoryID": 553, "Percentage": 0.0000600},
    {"CategoryID": 2400, "Slug": "Packaging", "ParentCategoryID": 553, "Percentage": 0.0000550},
    {"CategoryID": 2401, "Slug": "Wrapping Paper", "ParentCategoryID": 553, "Percentage": 0.0000500},
    {"CategoryID": 11, "Slug": "Handwriting", "ParentCategoryID": 23, "Percentage": 0.0000450},
    {"CategoryID": 15, "Slug": "Slab Serif", "ParentCategoryID": 23, "Percentage": 0.0000400},
    {"CategoryID": 16, "Slug": "Decorative", "ParentCategoryID": 23, "Percentage": 0.0000350},
    {"CategoryID": 737, "Slug": "Machine Embroidery", "ParentCategoryID": 735, "Percentage": 0.0000300},
    {"CategoryID": 738, "Slug": "Hand Embroidery", "ParentCategoryID": 735, "Percentage": 0.0000250},
    {"CategoryID": 2247, "Slug": "Files", "ParentCategoryID": 2245, "Percentage": 0.0000200},
    {"CategoryID": 2248, "Slug": "Templates", "ParentCategoryID": 2245, "Percentage": 0.0000150},
    {"CategoryID": 2249, "Slug": "3D Models", "ParentCategoryID": 2244, "Percentage": 0.0000100},
    {"CategoryID": 2250, "Slug": "Knitting Patterns", "ParentCategoryID": 2246, "Percentage": 0.0000050},
]
