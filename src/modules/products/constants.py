"""Product API message constants.

The Spanish strings are part of the public contract: clients and tests
match on the exact text.
"""

from decimal import Decimal

MSG_INVALID_ID = "ID no válido"
MSG_NAME_EMPTY = "El nombre del producto no puede ir vacío"
MSG_NAME_TOO_LONG = "El nombre del producto no puede superar los 255 caracteres"
MSG_PRICE_NOT_NUMERIC = "Valor no válido"
MSG_PRICE_EMPTY = "El precio del producto no puede ir vacío"
MSG_PRICE_INVALID = "Precio no válido"
MSG_AVAILABILITY_INVALID = "Valor de disponibilidad no válido"

MSG_PRODUCT_NOT_FOUND = "Producto No Encontrado"
MSG_PRODUCT_DELETED = "Producto Eliminado"

# Bookkeeping columns hidden from the collection listing.
LIST_EXCLUDED_FIELDS: tuple[str, ...] = ("created_at", "updated_at")
LIST_ORDERING: tuple[str, ...] = ("id",)

# ``products.name`` is VARCHAR(255).
NAME_MAX_LENGTH = 255

# ``products.price`` is NUMERIC(12, 2).
PRICE_MAX = Decimal("9999999999.99")
