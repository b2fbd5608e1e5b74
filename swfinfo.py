#!/usr/bin/env python3

# swfheaders is released under WTFPL
# You just DO WHAT THE FUCK YOU WANT TO.
# https://github.com/sirkris/WTFPL/blob/master/WTFPL.md

import sys

try:
    
    from swfheaders import swfheaders_boot
    
except Exception as e:
    
    import traceback
    
    print( traceback.format_exc() )
    
    print( 'Could not import swfheaders! Is it installed, or are you running from the source directory?' )
    
    sys.exit( 1 )
    

sys.exit( swfheaders_boot.boot() )
