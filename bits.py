from bitarray import bitarray
from bitarray.util import ba2int, int2ba, zeros

class bits:
	"Immutable(ish) unsigned bit string on top of the bitarray module"
	def __init__(self, val=None):
		self._val = bitarray() if val is None else val
	def __len__(self):
		return len(self._val)

	@classmethod
	def concat(cls, parts):
		"Join bits objects into one, extending a single bitarray in place"
		ret = bitarray()
		for part in parts:
			ret.extend(part._val)
		return cls(ret)
	def pad_left(self, multiple):
		"Prepend zeros until the length is a multiple of multiple"
		pad = (-len(self)) % multiple
		if not pad:
			return self
		return bits(zeros(pad) + self._val)
	def groups(self, width):
		"Yield the value of each consecutive width-bit group, most significant first"
		if width < 1:
			raise ValueError("Cannot cut into groups of %d bits" % width)
		if len(self) % width:
			raise ValueError("Length %d is not a multiple of %d" % (len(self), width))
		if width == 1:
			yield from self._val
			return
		for i in range(0, len(self), width):
			yield ba2int(self._val[i:i+width])

	@classmethod
	def encode_int(cls, val, length=None):
		if val < 0:
			raise ValueError("Cannot encode %d as unsigned" % val)
		if length is None:
			length = val.bit_length()
		if val >= 2**length:
			raise ValueError("Cannot encode %d as a %d-bit unsigned integer" % (val, length))
		if length == 0:
			return cls()
		return cls(int2ba(val, length))
	def decode_int(self):
		if not len(self):
			return 0
		return ba2int(self._val)
