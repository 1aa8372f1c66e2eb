"""
Static Aura product catalog.
"""

from aura.schemas.catalog import Product


PRODUCTS = [
    Product(
        id="p1",
        name="Aura Tone",
        tagline="Sound, softened.",
        description="Over-ear headphones wrapped in sand-toned knit and brushed aluminum",
        longDescription=(
            "Aura Tone pairs warm, natural acoustics with a knit headband that "
            "softens over time. Adaptive quiet mode lowers the world around you "
            "without sealing you away from it."
        ),
        price=349.0,
        category="Audio",
        imageUrl="https://images.unsplash.com/photo-1505740420928-5e560c06d30e?auto=format&fit=crop&q=80&w=1200",
        features=["Adaptive quiet mode", "40-hour battery", "Knit cotton headband"],
    ),
    Product(
        id="p2",
        name="Aura Pebble",
        tagline="A speaker you want to hold.",
        description="A palm-sized speaker carved in sandstone composite",
        price=179.0,
        category="Audio",
        imageUrl="https://images.unsplash.com/photo-1608043152269-423dbba4e7e1?auto=format&fit=crop&q=80&w=1200",
        features=["360-degree sound", "Sandstone composite shell", "Water resistant"],
    ),
    Product(
        id="p3",
        name="Aura Band",
        tagline="Wellbeing, worn lightly.",
        description="A soft fabric band that tracks rest and movement without a screen",
        longDescription=(
            "Aura Band reads your rhythms through organic cotton and a hidden "
            "sensor core. No display, no buzzing. A gentle morning summary is all "
            "it asks of your attention."
        ),
        price=199.0,
        category="Wearable",
        imageUrl="https://images.unsplash.com/photo-1575311373937-040b8e1fd5b6?auto=format&fit=crop&q=80&w=1200",
        features=["Sleep and rest tracking", "Organic cotton strap", "7-day battery"],
    ),
    Product(
        id="p4",
        name="Aura Loop",
        tagline="Presence, on your finger.",
        description="A brushed aluminum ring with silent haptic reminders",
        price=249.0,
        category="Wearable",
        imageUrl="https://images.unsplash.com/photo-1605100804763-247f67b3557e?auto=format&fit=crop&q=80&w=1200",
        features=["Silent haptics", "Untreated aluminum", "Heart rate sensing"],
    ),
    Product(
        id="p5",
        name="Aura Slate",
        tagline="A phone that lets you go.",
        description="A matte paper-like display phone designed for fewer, calmer sessions",
        price=599.0,
        category="Mobile",
        imageUrl="https://images.unsplash.com/photo-1511707171634-5f897ff02aa9?auto=format&fit=crop&q=80&w=1200",
        features=["Matte paper-like display", "Focus profiles", "Two-day battery"],
    ),
    Product(
        id="p6",
        name="Aura Hearth",
        tagline="Light that follows the sun.",
        description="A linen-shaded lamp that shifts its warmth with the time of day",
        longDescription=(
            "Aura Hearth glows amber at dusk and crisp at noon, following the sun "
            "so your home keeps a natural rhythm. The linen shade is woven by hand."
        ),
        price=229.0,
        category="Home",
        imageUrl="https://images.unsplash.com/photo-1507473885765-e6ed057f782c?auto=format&fit=crop&q=80&w=1200",
        features=["Circadian color shift", "Hand-woven linen shade", "Touch dimming"],
    ),
]
