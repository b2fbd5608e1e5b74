#!/usr/bin/env python3

# swfheaders is released under WTFPL
# You just DO WHAT THE FUCK YOU WANT TO.
# https://github.com/sirkris/WTFPL/blob/master/WTFPL.md

import os
import sys
import unittest

from swfheaders.core import SWFConstants as SC

if __name__ == '__main__':
    
    args = sys.argv[1:]
    
    if len( args ) > 0:
        
        only_run = args[0]
        
    else:
        
        only_run = None
        
    
    loader = unittest.TestLoader()
    
    if only_run is None:
        
        pattern = 'Test*.py'
        
    else:
        
        pattern = 'Test{}.py'.format( only_run )
        
    
    test_dir = os.path.join( SC.BASE_DIR, 'swfheaders', 'test' )
    
    suite = loader.discover( test_dir, pattern = pattern, top_level_dir = test_dir )
    
    result = unittest.TextTestRunner( verbosity = 2 ).run( suite )
    
    print( 'This was version ' + str( SC.SOFTWARE_VERSION ) )
    
    sys.exit( 0 if result.wasSuccessful() else 1 )
    
