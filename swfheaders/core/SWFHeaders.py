import struct
import typing

from swfheaders.core import SWFBitRange
from swfheaders.core import SWFConstants as SC
from swfheaders.core import SWFData
from swfheaders.core import SWFDecodedStream
from swfheaders.core import SWFExceptions
from swfheaders.core import SWFGlobals as SG

# swf header layout, everything little endian:
#
# signature: u8. 'F', 'C', or 'Z' for uncompressed, zlib, or lzma
# magic: two u8s, always 'W' 'S'
# version: u8
# file length: u32, the uncompressed total. we never check it
#
# everything from here on may be compressed:
#
# frame size: a RECT. five bits of nbits, then xmin, xmax, ymin, ymax, each nbits long
# frame rate: 'u16', but really 8.8 fixed point
# frame count: u16

class SWFHeaders( object ):
    
    def __init__( self, signature: int, version: int, file_length: int, width: int, height: int, frame_rate: int, frame_count: int ):
        
        object.__setattr__( self, '_signature', signature )
        object.__setattr__( self, '_version', version )
        object.__setattr__( self, '_file_length', file_length )
        object.__setattr__( self, '_width', width )
        object.__setattr__( self, '_height', height )
        object.__setattr__( self, '_frame_rate', frame_rate )
        object.__setattr__( self, '_frame_count', frame_count )
        
    
    def __eq__( self, other ):
        
        if isinstance( other, SWFHeaders ):
            
            return self.ToTuple() == other.ToTuple()
            
        
        return NotImplemented
        
    
    def __hash__( self ):
        
        return hash( self.ToTuple() )
        
    
    def __repr__( self ):
        
        return 'SWF Headers: {}, version {}, {}x{} twips, {} fps, {} frames'.format( SC.signature_tag_lookup[ self._signature ], self._version, self._width, self._height, self._frame_rate, self._frame_count )
        
    
    def __delattr__( self, name ):
        
        raise AttributeError( 'SWF headers are immutable!' )
        
    
    def __setattr__( self, name, value ):
        
        raise AttributeError( 'SWF headers are immutable!' )
        
    
    def GetDimensions( self ) -> typing.Tuple[ int, int ]:
        
        # twips to pixels, which can lose accuracy
        
        return ( SWFData.ConvertTwipsToPixels( self._width ), SWFData.ConvertTwipsToPixels( self._height ) )
        
    
    def GetDimensionsTwips( self ) -> typing.Tuple[ int, int ]:
        
        return ( self._width, self._height )
        
    
    def GetFileLength( self ) -> int:
        
        return self._file_length
        
    
    def GetFrameCount( self ) -> int:
        
        return self._frame_count
        
    
    def GetFrameRate( self ) -> int:
        
        return self._frame_rate
        
    
    def GetSignature( self ) -> int:
        
        return self._signature
        
    
    def GetVersion( self ) -> int:
        
        return self._version
        
    
    def ToDict( self ) -> dict:
        
        return {
            'signature' : SC.signature_tag_lookup[ self._signature ],
            'compression' : SC.signature_string_lookup[ self._signature ],
            'version' : self._version,
            'file_length' : self._file_length,
            'dimensions_twips' : list( self.GetDimensionsTwips() ),
            'dimensions' : list( self.GetDimensions() ),
            'frame_rate' : self._frame_rate,
            'frame_count' : self._frame_count
        }
        
    
    def ToTuple( self ):
        
        return ( self._signature, self._version, self._file_length, self._width, self._height, self._frame_rate, self._frame_count )
        
    
def GetFlashProperties( path ):
    
    ( headers, decoded_swf ) = Open( path )
    
    with decoded_swf:
        
        ( width, height ) = headers.GetDimensions()
        
        num_frames = headers.GetFrameCount()
        fps = headers.GetFrameRate()
        
        if fps == 0:
            
            duration = None
            
        else:
            
            duration = ( 1000 * num_frames ) // fps
            
        
        return ( ( width, height ), duration, num_frames )
        
    

def GetSignatureFromPrefix( prefix_bytes: bytes ):
    
    for ( signature, tag ) in SC.signature_tag_lookup.items():
        
        if prefix_bytes.startswith( bytes( tag, 'ascii' ) ):
            
            return signature
            
        
    
    return None
    

def Open( path ):
    
    f = open( path, 'rb' )
    
    return ReadFrom( f )
    

def ParseRect( f ) -> typing.Tuple[ int, int ]:
    
    ( first_byte, ) = SWFData.ReadExactly( f, 1 )
    
    nbits = ( first_byte >> 3 ) & 0b0001_1111
    
    # 5 + nbits * 4 is always odd, so this one first byte plus the floor is enough bytes for the whole record
    num_more_bytes = ( SC.RECT_NBITS_NUM_BITS + nbits * 4 ) // 8
    
    rect_bytes = bytes( [ first_byte ] ) + SWFData.ReadExactly( f, num_more_bytes )
    
    # xmin and ymin are assumed zero
    width = SWFBitRange.GetBitRange( rect_bytes, SC.RECT_NBITS_NUM_BITS + nbits, SC.RECT_NBITS_NUM_BITS + nbits * 2 )
    height = SWFBitRange.GetBitRange( rect_bytes, SC.RECT_NBITS_NUM_BITS + nbits * 3, SC.RECT_NBITS_NUM_BITS + nbits * 4 )
    
    if SG.header_report_mode:
        
        SWFData.ShowText( 'RECT: nbits {}, read {} bytes, width {}, height {}'.format( nbits, len( rect_bytes ), width, height ) )
        
    
    return ( width, height )
    

def ReadFrom( f ) -> typing.Tuple[ SWFHeaders, SWFDecodedStream.DecodedSWF ]:
    
    # we own f from here. if anything goes wrong, we close it
    
    try:
        
        ( first_byte, ) = SWFData.ReadExactly( f, 1 )
        
        if first_byte not in SC.first_byte_to_signature_lookup:
            
            raise SWFExceptions.NotSWFException( 'Invalid SWF signature byte: {}'.format( repr( bytes( [ first_byte ] ) ) ) )
            
        
        signature = SC.first_byte_to_signature_lookup[ first_byte ]
        
        magic = SWFData.ReadExactly( f, 2 )
        
        if magic != SC.SWF_MAGIC:
            
            raise SWFExceptions.NotSWFException( 'Invalid SWF magic bytes: {}'.format( repr( magic ) ) )
            
        
        ( version, ) = SWFData.ReadExactly( f, 1 )
        
        ( file_length, ) = struct.unpack( '<I', SWFData.ReadExactly( f, 4 ) )
        
        if SG.header_report_mode:
            
            SWFData.ShowText( 'SWF: {}, version {}, claimed file length {}'.format( SC.signature_tag_lookup[ signature ], version, file_length ) )
            
        
        decoded_swf = SWFDecodedStream.DecodedSWF( f, signature )
        
        ( width, height ) = ParseRect( decoded_swf )
        
        ( frame_rate_lower, frame_rate_upper ) = SWFData.ReadExactly( decoded_swf, 2 )
        
        if frame_rate_lower != 0:
            
            raise SWFExceptions.FractionalFrameRateException( frame_rate_lower, frame_rate_upper )
            
        
        frame_rate = frame_rate_upper
        
        ( frame_count, ) = struct.unpack( '<H', SWFData.ReadExactly( decoded_swf, 2 ) )
        
    except Exception:
        
        f.close()
        
        raise
        
    
    headers = SWFHeaders( signature, version, file_length, width, height, frame_rate, frame_count )
    
    if SG.header_report_mode:
        
        SWFData.ShowText( repr( headers ) )
        
    
    return ( headers, decoded_swf )
