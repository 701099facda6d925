import os

from fast_permit.utils.env_utils import env_bool

# Raise when a permitted field is not declared on the record type
PERMIT_STRICT_FIELDS = env_bool("PERMIT_STRICT_FIELDS", True)

# Localisation of validation messages
LOCALE_DEFAULT = os.getenv("LOCALE_DEFAULT", "en")
LOCALE_FALLBACK = os.getenv("LOCALE_FALLBACK", "en")
LOCALE_PATH = os.getenv("LOCALE_PATH", os.path.join(os.getcwd(), "lang"))
