
class SMBCodecException(Exception):
	def __init__(self, message = ''):
		super().__init__(message)

class SMBTooShort(SMBCodecException):
	"""
	Input ran out before a mandatory field could be read.
	offset is the position reached inside the block being walked.
	"""
	def __init__(self, offset = 0, needed = 0, field = None):
		self.offset = offset
		self.needed = needed
		self.field = field
		msg = 'TooShort at offset %s, %s more bytes needed' % (offset, needed)
		if field is not None:
			msg += ' (%s)' % field
		super().__init__(msg)

class SMBBadStringFormat(SMBCodecException):
	def __init__(self, expected = None, got = None):
		self.expected = expected
		self.got = got
		super().__init__('BadStringFormat expected tag %s got %s' % (expected, got))

class SMBOddByteLength(SMBCodecException):
	def __init__(self, length = 0):
		self.length = length
		super().__init__('OddByteLength %s bytes can not be installed as parameter words' % length)

class SMBMissingFramingOffset(SMBCodecException):
	def __init__(self, msg = ''):
		if len(msg) == 0:
			super().__init__('MissingFramingOffset')
		else:
			super().__init__(msg)

class SMBUnknownCommandCode(SMBCodecException):
	def __init__(self, command = None, is_reply = False):
		self.command = command
		self.is_reply = is_reply
		super().__init__('UnknownCommandCode %s (%s)' % (command, 'reply' if is_reply is True else 'request'))

class SMBInternalInvariant(SMBCodecException):
	def __init__(self, msg = ''):
		if len(msg) == 0:
			super().__init__('InternalInvariant')
		else:
			super().__init__(msg)

class SMBUnknownInformationLevel(SMBCodecException):
	def __init__(self, level = None, kind = None):
		self.level = level
		self.kind = kind
		super().__init__('UnknownInformationLevel %s (%s)' % (level, kind))
