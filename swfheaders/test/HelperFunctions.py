import io
import lzma
import struct
import zlib

from swfheaders.core import SWFConstants as SC

def GetFakeRectBytes( nbits: int, xmin: int, xmax: int, ymin: int, ymax: int ) -> bytes:
    
    bits = '{:05b}'.format( nbits )
    
    if nbits > 0:
        
        for value in ( xmin, xmax, ymin, ymax ):
            
            bits += '{:0{}b}'.format( value, nbits )
            
        
    
    num_bytes = ( len( bits ) + 7 ) // 8
    
    bits = bits.ljust( num_bytes * 8, '0' )
    
    return int( bits, 2 ).to_bytes( num_bytes, 'big' )
    

def GetFakeSWFBody( nbits: int, width: int, height: int, frame_rate_lower = 0, frame_rate_upper = 24, frame_count = 5, rest = b'' ) -> bytes:
    
    return GetFakeRectBytes( nbits, 0, width, 0, height ) + bytes( [ frame_rate_lower, frame_rate_upper ] ) + struct.pack( '<H', frame_count ) + rest
    

def GetFakeSWFBytes( signature: int, body: bytes, version = 9, file_length = 100 ) -> bytes:
    
    tag = SC.signature_tag_lookup[ signature ]
    
    prefix = bytes( tag, 'ascii' ) + bytes( [ version ] ) + struct.pack( '<I', file_length )
    
    if signature == SC.SIGNATURE_ZLIB:
        
        body = zlib.compress( body )
        
    elif signature == SC.SIGNATURE_LZMA:
        
        body = GetFakeZWSBody( body )
        
    
    return prefix + body
    

def GetFakeZWSBody( body: bytes ) -> bytes:
    
    # python writes .lzma as 5 properties bytes, an 8 byte size, and then the data. ZWS wants a u32 compressed length instead of the size, before the properties
    
    lzma_alone_bytes = lzma.compress( body, format = lzma.FORMAT_ALONE )
    
    properties_bytes = lzma_alone_bytes[ : 5 ]
    lzma_data = lzma_alone_bytes[ 13 : ]
    
    return struct.pack( '<I', len( lzma_data ) ) + properties_bytes + lzma_data
    

class TrickleFile( io.BytesIO ):
    
    # gives back one byte per read, like a very slow pipe
    
    def read( self, size = -1 ):
        
        if size is None or size < 0:
            
            return super().read( size )
            
        
        return super().read( min( size, 1 ) )
        
    
