"""
Convert a digit sequence from a source radix to a target radix, with
optional custom digit alphabets.

	>>> PowerRadix("255", 10).to_text(16)
	'FF'
	>>> PowerRadix("yxy", ["x", "y"]).to_symbols(10)
	['5']
"""
import logging
from types import MappingProxyType

from radix import as_digits, as_radix, from_positional_base, to_positional_base, value_map

logger = logging.getLogger(__name__)

class PowerRadix:
	def __init__(self, digits, source_radix):
		"""
		digits is a string (one symbol per character), an int (its decimal characters)
		or a sequence of symbol tokens.
		source_radix is an int (leading symbols of radix.DEFAULT_ALPHABET) or a sequence of symbols.
		Only the shapes are checked here: anything else raises InvalidDigitError or
		InvalidRadixError. Digit membership and radix sizes fail on conversion.
		"""
		self._digits = as_digits(digits)
		self._source_radix = as_radix(source_radix)
		self._source_radix_map = MappingProxyType(value_map(self._source_radix.symbols))

	@property
	def digits(self) -> tuple:
		return self._digits
	@property
	def source_radix(self):
		return self._source_radix
	@property
	def source_base(self) -> int:
		return len(self._source_radix)

	def __int__(self):
		return from_positional_base(self._digits, self._source_radix.resolve(), self._source_radix_map)
	def __repr__(self):
		return "%s(%r, %r)" % (type(self).__name__, self._digits, self._source_radix)

	def to_symbols(self, target_radix) -> list:
		"Convert to target_radix, most significant symbol first"
		magnitude = int(self)
		target_alphabet = as_radix(target_radix).resolve()
		logger.debug("%r: %d-bit magnitude to base %d", self, magnitude.bit_length(), len(target_alphabet))
		return to_positional_base(magnitude, target_alphabet)
	def to_text(self, target_radix) -> str:
		"Only unambiguous when every target symbol is a single character"
		return "".join(map(str, self.to_symbols(target_radix)))
