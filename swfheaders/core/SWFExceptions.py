import collections.abc

class SWFException( Exception ):
    
    def __str__( self ):
        
        if isinstance( self.args, collections.abc.Iterable ):
            
            s = []
            
            for arg in self.args:
                
                try:
                    
                    s.append( str( arg ) )
                    
                except Exception:
                    
                    s.append( repr( arg ) )
                    
                
            
        else:
            
            s = [ repr( self.args ) ]
            
        
        return '\n'.join( s )
        
    

class UnknownException( SWFException ): pass

class BitRangeContractException( SWFException ): pass

class NotSWFException( SWFException ): pass
class DamagedSWFException( NotSWFException ): pass

class FractionalFrameRateException( SWFException ):
    
    def __init__( self, frame_rate_lower, frame_rate_upper ):
        
        self.frame_rate_lower = frame_rate_lower
        self.frame_rate_upper = frame_rate_upper
        
        super().__init__( 'Fractional frame rates are not supported! The frame rate was {}.{} in 8.8 fixed point.'.format( frame_rate_upper, frame_rate_lower ) )
        
    
