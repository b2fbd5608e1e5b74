import os
import sys
import threading
import time

from swfheaders.core import SWFConstants as SC

class SWFLogger( object ):
    
    # tees stdout and stderr into a log file for one run. the console gets the text untouched, while each line in the log starts with the version, the time, and the swf being read
    # one run is short, so the monthly file is picked when the log opens and kept until it closes
    
    def __init__( self, log_dir, prefix ):
        
        self._log_dir = log_dir
        self._prefix = prefix
        
        self._lock = threading.Lock()
        
        self._console = None
        self._console_broken = False
        self._previous_sys_stderr = None
        
        self._log_path = None
        self._log_file = None
        
        self._current_path = None
        self._at_line_start = True
        
    
    def __enter__( self ):
        
        self._console = sys.stdout
        self._previous_sys_stderr = sys.stderr
        
        self._console_broken = False
        
        self._OpenLog()
        
        sys.stdout = self
        sys.stderr = self
        
        return self
        
    
    def __exit__( self, exc_type, exc_val, exc_tb ):
        
        sys.stdout = self._console
        sys.stderr = self._previous_sys_stderr
        
        with self._lock:
            
            self._CloseLog()
            
        
        self._console = None
        self._previous_sys_stderr = None
        
        return False
        
    
    def _CloseLog( self ) -> None:
        
        if not self._at_line_start:
            
            self._log_file.write( '\n' )
            
            self._at_line_start = True
            
        
        self._log_file.close()
        
        self._log_file = None
        
    
    def _GetLinePrefix( self ) -> str:
        
        timestamp = time.strftime( '%Y-%m-%d %H:%M:%S' )
        
        if self._current_path is None:
            
            return 'v{}, {}: '.format( SC.SOFTWARE_VERSION, timestamp )
            
        
        return 'v{}, {}, {}: '.format( SC.SOFTWARE_VERSION, timestamp, os.path.basename( self._current_path ) )
        
    
    def _OpenLog( self ) -> None:
        
        current_time_struct = time.localtime()
        
        log_filename = '{} - {}-{:02}.log'.format( self._prefix, current_time_struct.tm_year, current_time_struct.tm_mon )
        
        self._log_path = os.path.join( self._log_dir, log_filename )
        
        is_new_file = not os.path.exists( self._log_path )
        
        self._log_file = open( self._log_path, 'a', encoding = 'utf-8' )
        
        if is_new_file:
            
            self._log_file.write( SC.UNICODE_BYTE_ORDER_MARK ) # so reader software sees utf-8
            
        
        self._at_line_start = True
        
    
    def _WriteToConsole( self, value ) -> None:
        
        # a console that has gone away (closed pipe, detached terminal) should not stop the log
        
        if self._console_broken:
            
            return
            
        
        try:
            
            if value is None:
                
                self._console.flush()
                
            else:
                
                self._console.write( value )
                
            
        except ( OSError, ValueError ):
            
            self._console_broken = True
            
        
    
    def flush( self ) -> None:
        
        with self._lock:
            
            if self._log_file is None:
                
                return
                
            
            self._WriteToConsole( None )
            
            self._log_file.flush()
            
        
    
    def GetLogPath( self ):
        
        return self._log_path
        
    
    def isatty( self ) -> bool:
        
        return False
        
    
    def SetCurrentPath( self, path ) -> None:
        
        with self._lock:
            
            self._current_path = path
            
        
    
    def write( self, value ) -> None:
        
        with self._lock:
            
            if self._log_file is None:
                
                return
                
            
            self._WriteToConsole( value )
            
            # print() sends the text and the newline as separate writes, so the prefix goes on wherever a line actually starts
            
            pieces = []
            
            lines = value.split( '\n' )
            
            for ( i, line ) in enumerate( lines ):
                
                is_last_line = i == len( lines ) - 1
                
                if is_last_line and line == '':
                    
                    break
                    
                
                if self._at_line_start and line != '':
                    
                    pieces.append( self._GetLinePrefix() )
                    
                
                pieces.append( line )
                
                if is_last_line:
                    
                    self._at_line_start = False
                    
                else:
                    
                    pieces.append( '\n' )
                    
                    self._at_line_start = True
                    
                
            
            self._log_file.write( ''.join( pieces ) )
            
        
    
