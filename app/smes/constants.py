PLACEHOLDER_IMAGE = "/placeholder.jpg"

# Scalar fields an owner may set on register/update
SME_PROFILE_FIELDS = [
    "name",
    "description",
    "email",
    "phone",
    "whatsapp",
    "facebook",
    "instagram",
    "twitter",
    "tiktok",
    "website",
    "blog",
    "address",
    "village",
    "district",
    "city",
    "postal_code",
    "latitude",
    "longitude",
]
