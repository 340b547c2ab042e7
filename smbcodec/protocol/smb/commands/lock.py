from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.commons import SMBLockType
from smbcodec.protocol.smb.primitives import U8, U16, U32
from smbcodec.protocol.smb.structures.locking import LOCKING_ANDX_RANGE32, LOCKING_ANDX_RANGE64
from smbcodec.protocol.smb.commands.base import SMBCommandBase

# MS-CIFS SMB_COM_LOCK_BYTE_RANGE
class SMB_COM_LOCK_BYTE_RANGE_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_LOCK_BYTE_RANGE

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.CountOfBytesToLock = 0
		self.LockOffsetInBytes = 0

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.CountOfBytesToLock = U32.read(buff, field = 'CountOfBytesToLock')
		self.LockOffsetInBytes = U32.read(buff, field = 'LockOffsetInBytes')

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U32.encode(self.CountOfBytesToLock)
		t += U32.encode(self.LockOffsetInBytes)
		return t

class SMB_COM_LOCK_BYTE_RANGE_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_LOCK_BYTE_RANGE
	IS_REPLY = True

# MS-CIFS SMB_COM_UNLOCK_BYTE_RANGE
class SMB_COM_UNLOCK_BYTE_RANGE_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_UNLOCK_BYTE_RANGE

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.CountOfBytesToUnlock = 0
		self.UnlockOffsetInBytes = 0

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.CountOfBytesToUnlock = U32.read(buff, field = 'CountOfBytesToUnlock')
		self.UnlockOffsetInBytes = U32.read(buff, field = 'UnlockOffsetInBytes')

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U32.encode(self.CountOfBytesToUnlock)
		t += U32.encode(self.UnlockOffsetInBytes)
		return t

class SMB_COM_UNLOCK_BYTE_RANGE_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_UNLOCK_BYTE_RANGE
	IS_REPLY = True

# MS-CIFS SMB_COM_LOCKING_ANDX
class SMB_COM_LOCKING_ANDX_REQ(SMBCommandBase):
	"""
	Unlocks and Locks hold LOCKING_ANDX_RANGE64 entries when
	TypeOfLock has LARGE_FILES set, LOCKING_ANDX_RANGE32 otherwise.
	"""
	COMMAND = SMBCommand.SMB_COM_LOCKING_ANDX
	ANDX = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.TypeOfLock = SMBLockType.READ_WRITE_LOCK
		self.NewOpLockLevel = 0
		self.Timeout = 0
		self.NumberOfRequestedUnlocks = 0
		self.NumberOfRequestedLocks = 0
		##### SMB_Data ###
		self.Unlocks = []
		self.Locks = []

	@property
	def range_type(self):
		if SMBLockType.LARGE_FILES in SMBLockType(self.TypeOfLock):
			return LOCKING_ANDX_RANGE64
		return LOCKING_ANDX_RANGE32

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.TypeOfLock = SMBLockType(U8.read(buff, field = 'TypeOfLock'))
		self.NewOpLockLevel = U8.read(buff, field = 'NewOpLockLevel')
		self.Timeout = U32.read(buff, field = 'Timeout')
		self.NumberOfRequestedUnlocks = U16.read(buff, field = 'NumberOfRequestedUnlocks')
		self.NumberOfRequestedLocks = U16.read(buff, field = 'NumberOfRequestedLocks')

	def _data_from_buffer(self, buff, data_offset):
		rt = self.range_type
		self.Unlocks = [rt.from_buffer(buff) for _ in range(self.NumberOfRequestedUnlocks)]
		self.Locks = [rt.from_buffer(buff) for _ in range(self.NumberOfRequestedLocks)]

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U8.encode(int(self.TypeOfLock))
		t += U8.encode(self.NewOpLockLevel)
		t += U32.encode(self.Timeout)
		t += U16.encode(self.NumberOfRequestedUnlocks)
		t += U16.encode(self.NumberOfRequestedLocks)
		return t

	def _data_to_bytes(self, data_offset):
		self.NumberOfRequestedUnlocks = len(self.Unlocks)
		self.NumberOfRequestedLocks = len(self.Locks)
		t = b''
		for r in self.Unlocks + self.Locks:
			t += r.to_bytes()
		return t

class SMB_COM_LOCKING_ANDX_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_LOCKING_ANDX
	ANDX = True
	IS_REPLY = True
