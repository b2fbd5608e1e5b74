import lzma
import struct
import zlib

from swfheaders.core import SWFConstants as SC
from swfheaders.core import SWFData
from swfheaders.core import SWFExceptions
from swfheaders.core import SWFGlobals as SG

class DecodedSWF( object ):
    
    # everything after byte 8 of a swf may be compressed. this wraps the raw file and gives back the decompressed bytes through one read call
    
    def __init__( self, f, signature: int ):
        
        if signature not in SC.signature_tag_lookup:
            
            raise SWFExceptions.NotSWFException( 'Unknown SWF signature type: {}'.format( signature ) )
            
        
        self._f = f
        self._signature = signature
        
        self._decompressor = None
        self._decompressed_buffer = b''
        self._buffer_position = 0
        self._decompressor_exhausted = False
        
        self._compressed_length = None
        
        if self._signature == SC.SIGNATURE_ZLIB:
            
            self._decompressor = zlib.decompressobj()
            
        elif self._signature == SC.SIGNATURE_LZMA:
            
            self._decompressor = self._InitialiseLZMADecompressor()
            
        
        if SG.stream_report_mode:
            
            SWFData.ShowText( 'Decoding swf body as {}.'.format( SC.signature_string_lookup[ self._signature ] ) )
            
        
    
    def __enter__( self ):
        
        return self
        
    
    def __exit__( self, exc_type, exc_val, exc_tb ):
        
        self.close()
        
        return False
        
    
    def _FillBufferLZMA( self ):
        
        if self._decompressor.eof:
            
            self._decompressor_exhausted = True
            
            return
            
        
        if self._decompressor.needs_input:
            
            raw_bytes = self._f.read( SC.READ_BLOCK_SIZE )
            
            if len( raw_bytes ) == 0:
                
                # plenty of real ZWS files have no end marker, so running out of file is the end
                self._decompressor_exhausted = True
                
                return
                
            
        else:
            
            raw_bytes = b''
            
        
        try:
            
            self._SetBuffer( self._decompressor.decompress( raw_bytes, max_length = SC.READ_BLOCK_SIZE ) )
            
        except lzma.LZMAError as e:
            
            raise SWFExceptions.DamagedSWFException( 'The swf\'s lzma data was damaged!' ) from e
            
        
    
    def _FillBufferZlib( self ):
        
        if self._decompressor.eof:
            
            self._decompressor_exhausted = True
            
            return
            
        
        raw_bytes = self._decompressor.unconsumed_tail
        
        try:
            
            if len( raw_bytes ) == 0:
                
                raw_bytes = self._f.read( SC.READ_BLOCK_SIZE )
                
                if len( raw_bytes ) == 0:
                    
                    self._SetBuffer( self._decompressor.flush() )
                    self._decompressor_exhausted = True
                    
                    return
                    
                
            
            self._SetBuffer( self._decompressor.decompress( raw_bytes, SC.READ_BLOCK_SIZE ) )
            
        except zlib.error as e:
            
            raise SWFExceptions.DamagedSWFException( 'The swf\'s zlib data was damaged!' ) from e
            
        
    
    def _InitialiseLZMADecompressor( self ):
        
        # ZWS does not store a normal .lzma header. it has a u32 compressed length and then the five properties bytes, with no uncompressed size
        # so we rebuild an lzma_alone header with an 'unknown' size and feed that in first
        
        compressed_length_bytes = SWFData.ReadExactly( self._f, SC.LZMA_COMPRESSED_LENGTH_NUM_BYTES )
        
        ( self._compressed_length, ) = struct.unpack( '<I', compressed_length_bytes )
        
        properties_bytes = SWFData.ReadExactly( self._f, SC.LZMA_PROPERTIES_NUM_BYTES )
        
        decompressor = lzma.LZMADecompressor( format = lzma.FORMAT_ALONE )
        
        try:
            
            decompressor.decompress( properties_bytes + SC.LZMA_UNKNOWN_UNCOMPRESSED_SIZE )
            
        except lzma.LZMAError as e:
            
            raise SWFExceptions.NotSWFException( 'Could not set up lzma decoding for this swf!' ) from e
            
        
        return decompressor
        
    
    def _ReadDecompressed( self, num_bytes: int ) -> bytes:
        
        # the buffer is only refilled once it is used up, so a small read costs its own size and no more
        
        while self._buffer_position == len( self._decompressed_buffer ) and not self._decompressor_exhausted:
            
            if self._signature == SC.SIGNATURE_ZLIB:
                
                self._FillBufferZlib()
                
            else:
                
                self._FillBufferLZMA()
                
            
        
        end_position = self._buffer_position + num_bytes
        
        result = self._decompressed_buffer[ self._buffer_position : end_position ]
        
        self._buffer_position += len( result )
        
        return result
        
    
    def _SetBuffer( self, decompressed_bytes: bytes ):
        
        self._decompressed_buffer = decompressed_bytes
        self._buffer_position = 0
        
    
    @property
    def closed( self ) -> bool:
        
        return self._f.closed
        
    
    def close( self ) -> None:
        
        self._decompressor = None
        self._SetBuffer( b'' )
        self._decompressor_exhausted = True
        
        self._f.close()
        
    
    def GetCompressedLength( self ):
        
        # only ZWS files store this
        
        return self._compressed_length
        
    
    def GetSignature( self ) -> int:
        
        return self._signature
        
    
    def read( self, num_bytes: int = -1 ) -> bytes:
        
        if self.closed:
            
            raise ValueError( 'I/O operation on closed file.' )
            
        
        if num_bytes is None or num_bytes < 0:
            
            return b''.join( SWFData.ReadFileLikeAsBlocks( self ) )
            
        
        if num_bytes == 0:
            
            return b''
            
        
        if self._signature == SC.SIGNATURE_UNCOMPRESSED:
            
            return self._f.read( num_bytes )
            
        
        return self._ReadDecompressed( num_bytes )
        
    
    def readable( self ) -> bool:
        
        return not self.closed
        
    
