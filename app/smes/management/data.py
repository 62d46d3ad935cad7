"""
Demo directory data used by the ``seed-directory`` command.

Each listing names its categories by name and carries its owner and
products inline so the command can create everything in one pass.
"""

CATEGORIES = [
    {"name": "Kuliner", "description": "Makanan dan minuman khas Bali"},
    {"name": "Kerajinan", "description": "Produk kerajinan tangan khas Bali"},
    {"name": "Fashion", "description": "Pakaian dan aksesori khas Bali"},
]

LISTINGS = [
    {
        "owner": {"name": "Made Sutama", "email": "warungmade@example.com"},
        "sme": {
            "name": "Warung Made",
            "description": "Warung terkenal yang menyajikan makanan khas Bali dengan cita rasa autentik",
            "email": "warungmade@example.com",
            "phone": "+62812345678",
            "whatsapp": "+62812345678",
            "instagram": "@warungmade.bali",
            "facebook": "warungmade.bali",
            "website": "https://warungmade.com",
            "address": "Jalan Raya Ubud No. 123",
            "city": "Gianyar",
            "district": "Ubud",
            "village": "Ubud",
            "postal_code": "80571",
            "latitude": -8.506853,
            "longitude": 115.263091,
        },
        "categories": ["Kuliner"],
        "image": {"url": "/placeholder.jpg", "alt": "Warung Made Storefront"},
        "products": [
            {
                "name": "Nasi Campur Bali",
                "description": "Nasi dengan berbagai lauk khas Bali",
                "price": 35000,
            },
            {
                "name": "Bebek Betutu",
                "description": "Bebek bumbu khas Bali yang dibungkus daun pisang",
                "price": 85000,
            },
        ],
    },
    {
        "owner": {"name": "Dewi Lestari", "email": "dewi.art@example.com"},
        "sme": {
            "name": "Dewi Art Gallery",
            "description": "Galeri seni yang menampilkan berbagai kerajinan tangan khas Bali",
            "email": "dewi.art@example.com",
            "phone": "+62876543210",
            "whatsapp": "+62876543210",
            "instagram": "@dewiart.bali",
            "facebook": "dewiart.bali",
            "website": "https://dewiart.com",
            "address": "Jalan Tegalalang No. 45",
            "city": "Gianyar",
            "district": "Tegalalang",
            "village": "Tegalalang",
            "postal_code": "80561",
            "latitude": -8.441741,
            "longitude": 115.275799,
        },
        "categories": ["Kerajinan"],
        "image": {"url": "/placeholder.jpg", "alt": "Dewi Art Gallery Storefront"},
        "products": [
            {
                "name": "Lukisan Tradisional Bali",
                "description": "Lukisan dengan motif tradisional Bali",
                "price": 1500000,
            },
            {
                "name": "Patung Garuda",
                "description": "Patung Garuda ukiran kayu",
                "price": 2500000,
            },
        ],
    },
    {
        "owner": {"name": "Komang Bata", "email": "batubata@example.com"},
        "sme": {
            "name": "Batu Bata Fashion",
            "description": "Butik fashion yang menjual pakaian modern dengan sentuhan tradisional Bali",
            "email": "batubata@example.com",
            "phone": "+62890123456",
            "whatsapp": "+62890123456",
            "instagram": "@batubata.fashion",
            "facebook": "batubata.fashion",
            "website": "https://batubata.com",
            "address": "Jalan Kuta Raya No. 88",
            "city": "Badung",
            "district": "Kuta",
            "village": "Kuta",
            "postal_code": "80361",
            "latitude": -8.719827,
            "longitude": 115.169401,
        },
        "categories": ["Fashion"],
        "image": {"url": "/placeholder.jpg", "alt": "Batu Bata Fashion Store"},
        "products": [
            {
                "name": "Kemeja Endek Modern",
                "description": "Kemeja dengan kain endek Bali modern",
                "price": 450000,
            },
            {
                "name": "Dress Batik Bali",
                "description": "Dress dengan motif batik khas Bali",
                "price": 650000,
            },
        ],
    },
]
