from setver.objects.version import SealedVersionError, SetVersion, format_version
from setver.objects.utils import natural_number, natural_numbers
from setver.parser.parser import EmptyVersionError, IllegalCharacterError, \
    NonUniqueElementsError, SetVerParseError, TooManySetsError, UnclosedBraceError, parse
from setver.comparator import Comparison, compare, is_strict_subset, \
    is_strict_superset, is_subset, is_superset, setver_ordering
from setver.codec import INTEGRALTERNATIVE_BYTES, IntegralternativeOverflowError, \
    bytes_to_integer, string_to_bytes, text_to_byte_encoding, text_to_integer_encoding, \
    to_byte_encoding, to_integer_encoding
