import io
import os
import struct
import zlib

import unittest

from swfheaders.core import SWFConstants as SC
from swfheaders.core import SWFDecodedStream
from swfheaders.core import SWFExceptions
from swfheaders.test import HelperFunctions as HF

class TestSWFDecodedStream( unittest.TestCase ):
    
    def _read_all_in_pieces( self, decoded_swf, piece_size ):
        
        pieces = []
        
        while True:
            
            piece = decoded_swf.read( piece_size )
            
            self.assertLessEqual( len( piece ), piece_size )
            
            if len( piece ) == 0:
                
                break
                
            
            pieces.append( piece )
            
        
        return b''.join( pieces )
        
    
    def test_uncompressed( self ):
        
        payload = os.urandom( 1000 )
        
        decoded_swf = SWFDecodedStream.DecodedSWF( io.BytesIO( payload ), SC.SIGNATURE_UNCOMPRESSED )
        
        self.assertEqual( decoded_swf.GetSignature(), SC.SIGNATURE_UNCOMPRESSED )
        self.assertEqual( decoded_swf.read( 10 ), payload[ : 10 ] )
        self.assertEqual( decoded_swf.read(), payload[ 10 : ] )
        self.assertEqual( decoded_swf.read( 10 ), b'' )
        
    
    def test_zlib( self ):
        
        payload = os.urandom( 500 ) + b'swf' * 200000
        
        decoded_swf = SWFDecodedStream.DecodedSWF( io.BytesIO( zlib.compress( payload ) ), SC.SIGNATURE_ZLIB )
        
        self.assertEqual( decoded_swf.GetSignature(), SC.SIGNATURE_ZLIB )
        self.assertIsNone( decoded_swf.GetCompressedLength() )
        
        self.assertEqual( self._read_all_in_pieces( decoded_swf, 777 ), payload )
        
    
    def test_zlib_trickle( self ):
        
        payload = b'hello swf ' * 50
        
        decoded_swf = SWFDecodedStream.DecodedSWF( HF.TrickleFile( zlib.compress( payload ) ), SC.SIGNATURE_ZLIB )
        
        self.assertEqual( decoded_swf.read(), payload )
        
    
    def test_lzma( self ):
        
        payload = os.urandom( 500 ) + b'swf' * 200000
        
        zws_body = HF.GetFakeZWSBody( payload )
        
        decoded_swf = SWFDecodedStream.DecodedSWF( io.BytesIO( zws_body ), SC.SIGNATURE_LZMA )
        
        self.assertEqual( decoded_swf.GetSignature(), SC.SIGNATURE_LZMA )
        self.assertEqual( decoded_swf.GetCompressedLength(), len( zws_body ) - 9 )
        
        self.assertEqual( self._read_all_in_pieces( decoded_swf, 4096 ), payload )
        
    
    def test_lzma_no_end_marker( self ):
        
        payload = b'some frames ' * 100
        
        zws_body = HF.GetFakeZWSBody( payload )
        
        # chop the end marker off. the data is all still there, it just stops
        decoded_swf = SWFDecodedStream.DecodedSWF( io.BytesIO( zws_body[ : -6 ] ), SC.SIGNATURE_LZMA )
        
        result = self._read_all_in_pieces( decoded_swf, 100 )
        
        self.assertTrue( payload.startswith( result ) )
        
    
    def test_lzma_bad_setup( self ):
        
        bad_properties = struct.pack( '<I', 10 ) + b'\xff' * 5 + b'\x00' * 10
        
        with self.assertRaises( SWFExceptions.NotSWFException ):
            
            SWFDecodedStream.DecodedSWF( io.BytesIO( bad_properties ), SC.SIGNATURE_LZMA )
            
        
        with self.assertRaises( SWFExceptions.NotSWFException ):
            
            SWFDecodedStream.DecodedSWF( io.BytesIO( b'\x0a\x00\x00\x00\x5d' ), SC.SIGNATURE_LZMA )
            
        
    
    def test_damaged_zlib( self ):
        
        decoded_swf = SWFDecodedStream.DecodedSWF( io.BytesIO( b'this is not zlib data at all' ), SC.SIGNATURE_ZLIB )
        
        with self.assertRaises( SWFExceptions.DamagedSWFException ):
            
            decoded_swf.read( 10 )
            
        
    
    def test_io_errors_propagate( self ):
        
        class BrokenFile( io.BytesIO ):
            
            def read( self, size = -1 ):
                
                raise OSError( 'disk fell off' )
                
            
        
        decoded_swf = SWFDecodedStream.DecodedSWF( BrokenFile(), SC.SIGNATURE_ZLIB )
        
        with self.assertRaises( OSError ):
            
            decoded_swf.read( 10 )
            
        
        with self.assertRaises( OSError ):
            
            SWFDecodedStream.DecodedSWF( BrokenFile(), SC.SIGNATURE_LZMA )
            
        
    
    def test_unknown_signature( self ):
        
        with self.assertRaises( SWFExceptions.NotSWFException ):
            
            SWFDecodedStream.DecodedSWF( io.BytesIO( b'' ), 7 )
            
        
    
    def test_small_reads( self ):
        
        # tag parsers read a couple of bytes at a time, across many buffer refills
        
        payload = os.urandom( 300 * 1024 ) + b'swf' * 100000
        
        bodies = {
            SC.SIGNATURE_UNCOMPRESSED : payload,
            SC.SIGNATURE_ZLIB : zlib.compress( payload ),
            SC.SIGNATURE_LZMA : HF.GetFakeZWSBody( payload )
        }
        
        for ( signature, body ) in bodies.items():
            
            decoded_swf = SWFDecodedStream.DecodedSWF( io.BytesIO( body ), signature )
            
            self.assertEqual( self._read_all_in_pieces( decoded_swf, 2 ), payload )
            
            decoded_swf.close()
            
        
    
    def test_close( self ):
        
        f = io.BytesIO( zlib.compress( b'abc' ) )
        
        with SWFDecodedStream.DecodedSWF( f, SC.SIGNATURE_ZLIB ) as decoded_swf:
            
            self.assertEqual( decoded_swf.read( 1 ), b'a' )
            self.assertFalse( decoded_swf.closed )
            self.assertTrue( decoded_swf.readable() )
            
        
        self.assertTrue( f.closed )
        self.assertTrue( decoded_swf.closed )
        
    
    def test_read_after_close( self ):
        
        bodies = {
            SC.SIGNATURE_UNCOMPRESSED : b'abc',
            SC.SIGNATURE_ZLIB : zlib.compress( b'abc' ),
            SC.SIGNATURE_LZMA : HF.GetFakeZWSBody( b'abc' )
        }
        
        for ( signature, body ) in bodies.items():
            
            decoded_swf = SWFDecodedStream.DecodedSWF( io.BytesIO( body ), signature )
            
            decoded_swf.close()
            
            self.assertFalse( decoded_swf.readable() )
            
            with self.assertRaises( ValueError ):
                
                decoded_swf.read( 1 )
                
            
            with self.assertRaises( ValueError ):
                
                decoded_swf.read()
                
            
        
    
