def hexdump(src, length = 16, sep = '.', start = 0):
	"""
	Pretty printing of binary data for the command line tools.
	:param src: Binary blob
	:type src: bytes
	:param length: Bytes per row
	:type length: int
	:param sep: Character printed in place of non-printable bytes
	:type sep: str
	:param start: Offset printed for the first row
	:type start: int
	:return: str
	"""
	result = []
	for i in range(0, len(src), length):
		row = src[i:i+length]
		half = length // 2
		hexa = ' '.join('%02x' % c for c in row[:half])
		if len(row) > half:
			hexa += '  ' + ' '.join('%02x' % c for c in row[half:])
		text = ''.join(chr(c) if 0x20 <= c < 0x7F else sep for c in row)
		result.append(('%08X:  %-' + str(length * 3 + 1) + 's  |%s|') % (start + i, hexa, text))
	return '\n'.join(result)

def from_hexstring(s):
	"""
	Accepts hex with or without whitespace, colons or a 0x prefix
	"""
	s = s.strip()
	if s.lower().startswith('0x'):
		s = s[2:]
	for c in [' ', '\t', '\r', '\n', ':']:
		s = s.replace(c, '')
	return bytes.fromhex(s)
