from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.commands.base import SMBCommandBase

# MS-CIFS SMB_COM_NT_CANCEL
# the server never answers a cancel
class SMB_COM_NT_CANCEL_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_NT_CANCEL
