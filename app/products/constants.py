# Scalar product fields an owner may change on update
PRODUCT_FIELDS = ["name", "description", "price", "is_available"]
