VERSION = '0.1.0'
VERSION_STATUS = ''
__version__ = VERSION
