from swfheaders.core import SWFConstants as SC
from swfheaders.core import SWFExceptions

# swf is full of 'bit values', numbers that do not sit on byte boundaries
# this is public so anyone continuing to parse a swf does not have to write it again

def GetBit( data: bytes, bit: int ) -> int:
    
    if bit < 0 or bit // 8 >= len( data ):
        
        raise SWFExceptions.BitRangeContractException( 'Bit {} is outside a buffer of {} bytes!'.format( bit, len( data ) ) )
        
    
    byte = data[ bit // 8 ]
    
    return ( byte >> ( 7 - bit % 8 ) ) & 1
    

def GetBitRange( data: bytes, start_bit: int, end_bit: int ) -> int:
    """
    Reads the bits in [start_bit, end_bit) as an unsigned int.
    
    Bits are counted from the most significant bit of the first byte, and the first bit read is the most significant bit of the result:
    
    GetBitRange( bytes( [ 0b0010_1100, 0b0111_0010 ] ), 2, 12 ) == 0b1011000111
    """
    
    length = end_bit - start_bit
    
    if start_bit < 0 or length < 0:
        
        raise SWFExceptions.BitRangeContractException( 'Bad bit range [{}, {})!'.format( start_bit, end_bit ) )
        
    
    if length > SC.MAX_BIT_RANGE_LENGTH:
        
        raise SWFExceptions.BitRangeContractException( 'Bit range [{}, {}) is {} bits long, but the maximum is {}!'.format( start_bit, end_bit, length, SC.MAX_BIT_RANGE_LENGTH ) )
        
    
    num_bytes_needed = ( end_bit + 7 ) // 8
    
    if num_bytes_needed > len( data ):
        
        raise SWFExceptions.BitRangeContractException( 'Bit range [{}, {}) needs {} bytes, but the buffer only has {}!'.format( start_bit, end_bit, num_bytes_needed, len( data ) ) )
        
    
    result = 0
    
    for bit in range( start_bit, end_bit ):
        
        result = ( result << 1 ) | GetBit( data, bit )
        
    
    return result
    
