from smbcodec.exceptions import SMBTooShort, SMBInternalInvariant, SMBUnknownCommandCode
from smbcodec.protocol.smb.command_codes import SMBCommand, SMB_HEADER_SIZE
from smbcodec.protocol.smb.primitives import U8, U16
from smbcodec.protocol.smb.codec import decode_command

def patch_andx_offset(buffer, link_position, next_command, next_offset):
	"""
	Rewrites the AndX link starting at link_position of a bytearray in place.
	The reserved byte is left untouched.
	"""
	if link_position + 4 > len(buffer):
		raise SMBInternalInvariant('AndX link at %s is outside of the %s byte buffer' % (link_position, len(buffer)))
	code = next_command.value if isinstance(next_command, SMBCommand) else next_command
	buffer[link_position:link_position+1] = U8.encode(code)
	buffer[link_position+2:link_position+4] = U16.encode(next_offset)

def encode_andx_chain(commands, command_offset = SMB_HEADER_SIZE):
	"""
	Serializes a list of commands as one AndX chain.
	command_offset is where the WordCount of the first command lands,
	measured from the start of the SMB header.
	Every command but the last must be AndX capable.
	"""
	if len(commands) == 0:
		return b''
	for cmd in commands[:-1]:
		if cmd.ANDX is False:
			raise SMBInternalInvariant('%s can not be followed by another command' % cmd.__class__.__name__)

	starts = []
	blobs = []
	offset = command_offset
	for i, cmd in enumerate(commands):
		if cmd.ANDX is True:
			cmd.AndX.AndXCommand = SMBCommand.SMB_COM_NO_ANDX_COMMAND
			if i + 1 < len(commands):
				cmd.AndX.AndXCommand = commands[i+1].COMMAND
			cmd.AndX.AndXOffset = 0
		blob = cmd.to_bytes(cmd.data_offset_for(offset))
		starts.append(offset)
		blobs.append(blob)
		offset += len(blob)

	buffer = bytearray(b''.join(blobs))
	for i, cmd in enumerate(commands[:-1]):
		link_position = starts[i] - command_offset + 1
		patch_andx_offset(buffer, link_position, commands[i+1].COMMAND, starts[i+1])
		cmd.AndX.AndXOffset = starts[i+1]
	return bytes(buffer)

def decode_andx_chain(command_code, payload, is_reply, command_offset = SMB_HEADER_SIZE):
	"""
	Decodes the first command in payload and every command its AndX links point to.
	payload starts at the WordCount of the first command, which sits at
	command_offset from the start of the SMB header.
	"""
	commands = []
	pos = 0
	code = command_code
	while True:
		if pos >= len(payload):
			raise SMBTooShort(pos, 1, 'WordCount')
		word_count = payload[pos]
		data_offset = command_offset + pos + 1 + 2 * word_count + 2
		cmd, _ = decode_command(code, payload[pos:], is_reply, data_offset)
		commands.append(cmd)
		if cmd.ANDX is False or cmd.AndX.is_last is True:
			break
		if not isinstance(cmd.AndX.AndXCommand, SMBCommand):
			raise SMBUnknownCommandCode(cmd.AndX.AndXCommand, is_reply)
		next_pos = cmd.AndX.AndXOffset - command_offset
		if next_pos <= pos:
			raise SMBInternalInvariant('AndXOffset %s does not point forward' % cmd.AndX.AndXOffset)
		code = cmd.AndX.AndXCommand
		pos = next_pos
	return commands
