import io

from smbcodec import logger
from smbcodec.exceptions import SMBUnknownCommandCode, SMBInternalInvariant
from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb import commands as smbcommands

SMB_REQUESTS = {}
SMB_REPLIES = {}
for name in smbcommands.__all__:
	obj = getattr(smbcommands, name)
	if getattr(obj, 'COMMAND', None) is None:
		continue
	if obj.IS_REPLY is True:
		SMB_REPLIES[obj.COMMAND] = obj
	else:
		SMB_REQUESTS[obj.COMMAND] = obj

def to_command_code(command_code):
	"""
	Accepts an SMBCommand, its integer value or its name (with or without the SMB_COM_ prefix)
	"""
	if isinstance(command_code, SMBCommand):
		return command_code
	if isinstance(command_code, str):
		name = command_code.upper()
		if name.startswith('SMB_COM_') is False:
			name = 'SMB_COM_' + name
		try:
			return SMBCommand[name]
		except KeyError:
			raise SMBUnknownCommandCode(command_code)
	try:
		return SMBCommand(command_code)
	except ValueError:
		raise SMBUnknownCommandCode(command_code)

def command_class(command_code, is_reply = False):
	code = to_command_code(command_code)
	table = SMB_REPLIES if is_reply is True else SMB_REQUESTS
	if code not in table:
		raise SMBUnknownCommandCode(code, is_reply)
	return table[code]

def new_command(command_code, is_reply = False):
	"""
	Returns an empty message for the command code
	"""
	return command_class(command_code, is_reply)()

def decode_command(command_code, payload, is_reply = False, data_offset = None, cmd = None):
	"""
	Decodes one command message (WordCount onwards) from payload.
	cmd is an optional sink of the matching class, the formats of its
	strings select how untagged strings are parsed (unicode or OEM).
	Returns (command, consumed bytes)
	"""
	class_ = command_class(command_code, is_reply)
	if cmd is not None and not isinstance(cmd, class_):
		raise SMBInternalInvariant('%s can not decode into %s' % (class_.__name__, cmd.__class__.__name__))
	logger.log(1, 'Decoding %s' % class_.__name__)
	buff = io.BytesIO(payload)
	cmd = class_.from_buffer(buff, data_offset, cmd)
	return cmd, buff.tell()

def encode_command(command, data_offset = None):
	logger.log(1, 'Encoding %s' % command.__class__.__name__)
	return command.to_bytes(data_offset)
