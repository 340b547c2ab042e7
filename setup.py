from setuptools import setup, find_packages
import re

VERSIONFILE="smbcodec/_version.py"
verstrline = open(VERSIONFILE, "rt").read()
VSRE = r"^__version__ = ['\"]([^'\"]*)['\"]"
mo = re.search(VSRE, verstrline, re.M)
if mo:
    verstr = mo.group(1)
else:
    raise RuntimeError("Unable to find version string in %s." % (VERSIONFILE,))

setup(
	# Application name:
	name="smbcodec",

	# Version number (initial):
	version=verstr,

	# Packages
	packages=find_packages(exclude=["tests*"]),

	# Include additional files into the package
	include_package_data=True,

	zip_safe = False,
	#
	description="SMB 1.0 / CIFS command message codec",

	python_requires='>=3.7',
	install_requires=[
		'winacl>=0.1.9',
	],
	extras_require={
		'test': [
			'pytest',
		],
	},

	classifiers=[
		"Programming Language :: Python :: 3.7",
		"Operating System :: OS Independent",
	],
	entry_points={
		'console_scripts': [
			'smbdecode = smbcodec.examples.smbdecode:main',
		],

	}
)
