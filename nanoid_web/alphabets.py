"""
Alphabets and sizes of the built-in identifier shapes.
"""
import string

# URL-safe alphabet: punctuation, digits, then letters
DEFAULT_ALPHABET = "-_" + string.digits + string.ascii_uppercase + string.ascii_lowercase

# Letters only. HTML element ids may not start with a digit
ALPHA_ONLY = DEFAULT_ALPHABET.lstrip("-_" + string.digits)

# Letters and digits, no punctuation
ALPHA_NUMERIC = string.digits + string.ascii_uppercase + string.ascii_lowercase

DEFAULT_SIZE = 21
SHORT_SIZE = 14

WEB_SAFE_GROUPS = 4
WEB_SAFE_GROUP_SIZE = 4
WEB_SAFE_SEPARATOR = "-"
