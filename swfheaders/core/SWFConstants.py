import os
import sys

try:
    
    sc_realpath_dir = os.path.dirname( os.path.realpath( __file__ ) )
    
    SWFHEADERS_MODULE_DIR = os.path.split( sc_realpath_dir )[0]
    
    BASE_DIR = os.path.split( SWFHEADERS_MODULE_DIR )[0]
    
except NameError: # if __file__ is not defined due to some weird OS
    
    BASE_DIR = os.path.realpath( sys.path[0] )
    

if BASE_DIR == '':
    
    BASE_DIR = os.getcwd()
    

SOFTWARE_VERSION = 3

READ_BLOCK_SIZE = 256 * 1024

UNICODE_BYTE_ORDER_MARK = '\ufeff'

# Signatures

SIGNATURE_UNCOMPRESSED = 0
SIGNATURE_ZLIB = 1
SIGNATURE_LZMA = 2

first_byte_to_signature_lookup = {
    ord( 'F' ) : SIGNATURE_UNCOMPRESSED,
    ord( 'C' ) : SIGNATURE_ZLIB,
    ord( 'Z' ) : SIGNATURE_LZMA
}

signature_tag_lookup = {
    SIGNATURE_UNCOMPRESSED : 'FWS',
    SIGNATURE_ZLIB : 'CWS',
    SIGNATURE_LZMA : 'ZWS'
}

signature_string_lookup = {
    SIGNATURE_UNCOMPRESSED : 'uncompressed',
    SIGNATURE_ZLIB : 'zlib compressed',
    SIGNATURE_LZMA : 'lzma compressed'
}

# Layout

SWF_MAGIC = b'WS'

# ZWS bodies carry a u32 compressed length and then the 5 lzma property bytes before the lzma data
LZMA_COMPRESSED_LENGTH_NUM_BYTES = 4
LZMA_PROPERTIES_NUM_BYTES = 5
LZMA_UNKNOWN_UNCOMPRESSED_SIZE = 8 * b'\xff'

RECT_NBITS_NUM_BITS = 5

MAX_BIT_RANGE_LENGTH = 31

TWIPS_PER_PIXEL = 20
