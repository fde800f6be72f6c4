import logging
from collections.abc import Sequence

from bits import bits

logger = logging.getLogger(__name__)

# digits, then uppercase, then lowercase; fixed, conversions depend on it
DEFAULT_ALPHABET: str = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

power_of_two_fast_path = True

class InvalidDigitError(ValueError):
	def __init__(self, symbol, position=None, alphabet=()):
		self.symbol = symbol
		self.position = position
		self.alphabet = tuple(alphabet)
		if position is None:
			message = "Invalid digits %r: expected a string, an int or a sequence of symbols" % (symbol,)
		else:
			message = "Invalid digit %r at position %d, expected one of %r" % (symbol, position, self.alphabet)
		super().__init__(message)

class InvalidRadixError(ValueError):
	def __init__(self, radix, reason):
		self.radix = radix
		super().__init__("Invalid radix %r: %s" % (radix, reason))

def key(symbol) -> str:
	"Lookup key of a symbol; 10 and '10' are the same digit"
	return str(symbol)

class Radix:
	"""
	An alphabet of digit symbols, either given explicitly or as a count
	of leading DEFAULT_ALPHABET symbols.
	`symbols` is the raw tuple, `resolve()` checks it before use.
	"""
	@property
	def symbols(self) -> tuple:
		raise NotImplementedError
	def resolve(self) -> tuple:
		symbols = self.symbols
		if len(symbols) < 2:
			raise InvalidRadixError(self, "at least 2 symbols are needed, got %d" % len(symbols))
		seen = set()
		for symbol in symbols:
			if key(symbol) in seen:
				raise InvalidRadixError(self, "duplicate symbol %r" % (symbol,))
			seen.add(key(symbol))
		return symbols
	def __len__(self):
		return len(self.symbols)
	def __eq__(self, other):
		if isinstance(other, Radix):
			return self.symbols == other.symbols
		return NotImplemented
	def __hash__(self):
		return hash(self.symbols)

class Count(Radix):
	def __init__(self, n: int):
		self.n = n
		self._symbols = tuple(DEFAULT_ALPHABET[:max(n, 0)])
	@property
	def symbols(self) -> tuple:
		return self._symbols
	def resolve(self) -> tuple:
		if not 2 <= self.n <= len(self._symbols):
			raise InvalidRadixError(self, "base must be between 2 and %d" % len(DEFAULT_ALPHABET))
		return super().resolve()
	def __repr__(self):
		return "Count(%d)" % self.n

class Alphabet(Radix):
	def __init__(self, symbols):
		self._symbols = tuple(symbols)
	@property
	def symbols(self) -> tuple:
		return self._symbols
	def __repr__(self):
		return "Alphabet(%r)" % (self._symbols,)

def as_radix(value) -> Radix:
	if isinstance(value, Radix):
		return value
	if isinstance(value, bool):
		raise InvalidRadixError(value, "expected an int or a sequence of symbols, not bool")
	if isinstance(value, int):
		return Count(value)
	if isinstance(value, Sequence):
		return Alphabet(value)
	raise InvalidRadixError(value, "expected an int or a sequence of symbols, not %s" % type(value).__name__)

def as_digits(value) -> tuple:
	"A string or an int splits into characters, any other sequence is taken as tokens"
	if isinstance(value, bool):
		raise InvalidDigitError(value)
	if isinstance(value, int):
		value = str(value)
	if isinstance(value, Sequence):
		return tuple(value)
	raise InvalidDigitError(value)

def power_of_two(base: int):
	"Return k if base == 2**k, else None"
	if power_of_two_fast_path and base > 1 and not base & (base - 1):
		return base.bit_length() - 1
	return None

def value_map(alphabet: Sequence) -> dict:
	return {key(symbol): i for i, symbol in enumerate(alphabet)}

def from_bit_groups(digits: Sequence, alphabet: Sequence, values: dict, width: int) -> int:
	"Each digit is a width-bit field of the result"
	logger.debug("packing %d digits as %d-bit groups", len(digits), width)
	fields = {k: bits.encode_int(v, width) for k, v in values.items()}
	parts = []
	for position, digit in enumerate(digits):
		try:
			parts.append(fields[key(digit)])
		except KeyError:
			raise InvalidDigitError(digit, position, alphabet) from None
	return bits.concat(parts).decode_int()

def to_bit_groups(i: int, alphabet: Sequence, width: int) -> list:
	logger.debug("cutting %d bits into %d-bit groups", i.bit_length(), width)
	return [alphabet[d] for d in bits.encode_int(i).pad_left(width).groups(width)]

def from_positional_base(digits: Sequence, alphabet: Sequence, values: dict = None) -> int:
	if values is None:
		values = value_map(alphabet)
	b = len(alphabet)
	width = power_of_two(b)
	if width is not None:
		return from_bit_groups(digits, alphabet, values, width)
	ret = 0
	for position, digit in enumerate(digits):
		try:
			ret = ret * b + values[key(digit)]
		except KeyError:
			raise InvalidDigitError(digit, position, alphabet) from None
	return ret

def to_positional_base(i: int, alphabet: Sequence) -> list:
	if i < 0:
		raise ValueError("Cannot convert negative integer %d" % i)
	if i == 0:
		return [alphabet[0]]
	b = len(alphabet)
	width = power_of_two(b)
	if width is not None:
		return to_bit_groups(i, alphabet, width)
	ret = []
	while i:
		i, d = divmod(i, b)
		ret.append(alphabet[d])
	ret.reverse()
	return ret

def convert(digits, source, target) -> list:
	"One-shot conversion of digits from the source radix to the target radix"
	digits = as_digits(digits)
	source_symbols = as_radix(source).resolve()
	target_symbols = as_radix(target).resolve()
	magnitude = from_positional_base(digits, source_symbols)
	logger.debug("converting %d digits from base %d to base %d", len(digits), len(source_symbols), len(target_symbols))
	return to_positional_base(magnitude, target_symbols)
