import collections.abc
import os
import sys
import traceback
import yaml

from swfheaders.core import SWFConstants as SC
from swfheaders.core import SWFExceptions

def ConvertTwipsToPixels( twips: int ) -> int:
    
    return twips // SC.TWIPS_PER_PIXEL
    

def DebugPrint( debug_info ):
    
    Print( debug_info )
    
    sys.stdout.flush()
    sys.stderr.flush()
    

def DumpToYAML( obj ) -> str:
    
    return yaml.safe_dump( obj, sort_keys = False, explicit_start = True )
    

def Print( text ):
    
    try:
        
        print( str( text ) )
        
    except Exception:
        
        print( repr( text ) )
        
    

ShowText = Print

def PrintException( e ):
    
    ( etype, value, tb ) = sys.exc_info()
    
    if value is None:
        
        ( etype, value, tb ) = ( type( e ), e, e.__traceback__ )
        
    
    PrintExceptionTuple( etype, value, tb )
    

def PrintExceptionTuple( etype, value, tb ):
    
    if etype is None:
        
        etype = SWFExceptions.UnknownException
        
    
    if value is None:
        
        value = 'Unknown error'
        
    
    if tb is None:
        
        trace = 'No error trace--here is the stack:' + os.linesep + ''.join( traceback.format_stack() )
        
    else:
        
        trace = ''.join( traceback.format_exception( etype, value, tb ) )
        
    
    message = str( etype.__name__ ) + ': ' + str( value ) + os.linesep + trace
    
    Print( '' )
    Print( 'Exception:' )
    
    DebugPrint( message )
    

ShowException = PrintException
ShowExceptionTuple = PrintExceptionTuple

def ReadFileLikeAsBlocks( f ) -> collections.abc.Iterator[ bytes ]:
    
    next_block = f.read( SC.READ_BLOCK_SIZE )
    
    while len( next_block ) > 0:
        
        yield next_block
        
        next_block = f.read( SC.READ_BLOCK_SIZE )
        
    
def ReadExactly( f, num_bytes: int ) -> bytes:
    
    # reads may legally come back short, so keep asking until we have it all or the source runs dry
    
    chunks = []
    num_bytes_read = 0
    
    while num_bytes_read < num_bytes:
        
        chunk = f.read( num_bytes - num_bytes_read )
        
        if chunk is None or len( chunk ) == 0:
            
            raise SWFExceptions.NotSWFException( 'Unexpected end of data! Wanted {} bytes, but only got {}.'.format( num_bytes, num_bytes_read ) )
            
        
        chunks.append( chunk )
        num_bytes_read += len( chunk )
        
    
    return b''.join( chunks )
    

