import sys
import logging

from smbcodec import logger
from smbcodec.exceptions import SMBCodecException
from smbcodec.protocol.smb.codec import decode_command, encode_command, to_command_code
from smbcodec.protocol.smb.andx import decode_andx_chain
from smbcodec.utils.hexdump import hexdump, from_hexstring

def command_code_arg(x):
	try:
		return int(x, 0)
	except ValueError:
		return x

def decode(args):
	payload = from_hexstring(args.payload)
	code = to_command_code(args.command)
	if args.chain is True:
		commands = decode_andx_chain(code, payload, args.reply, args.command_offset)
	else:
		cmd, consumed = decode_command(code, payload, args.reply, args.data_offset)
		logger.debug('Consumed %s of %s bytes' % (consumed, len(payload)))
		commands = [cmd]

	for cmd in commands:
		print(repr(cmd))
		if args.reencode is True:
			data_offset = args.data_offset
			if data_offset is None and cmd.COMMAND is not None:
				data_offset = cmd.data_offset_for(args.command_offset)
			print(hexdump(encode_command(cmd, data_offset)))

def main():
	import argparse

	parser = argparse.ArgumentParser(description='SMBv1 command decoder')
	parser.add_argument('-v', '--verbose', action='count', default=0)
	parser.add_argument('-r', '--reply', action='store_true', help='Decode the payload as a server reply')
	parser.add_argument('-c', '--chain', action='store_true', help='Follow AndX links')
	parser.add_argument('-e', '--reencode', action='store_true', help='Encode the decoded command again and print a hexdump')
	parser.add_argument('--data-offset', type=int, help='Absolute offset of the data bytes from the start of the SMB header')
	parser.add_argument('--command-offset', type=int, default=32, help='Absolute offset of the WordCount from the start of the SMB header. Default: 32')
	parser.add_argument('command', type=command_code_arg, help='Command code as number (0x72) or name (NEGOTIATE)')
	parser.add_argument('payload', help='Hex encoded message starting at WordCount')

	args = parser.parse_args()

	if args.verbose >= 1:
		logger.setLevel(logging.DEBUG)

	if args.verbose > 2:
		logger.setLevel(1) #enabling deep debug

	try:
		decode(args)
	except (SMBCodecException, ValueError) as e:
		print('Error: %s' % e, file=sys.stderr)
		sys.exit(1)

if __name__ == '__main__':
	main()
