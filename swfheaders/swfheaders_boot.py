#!/usr/bin/env python3

# swfheaders is released under WTFPL
# You just DO WHAT THE FUCK YOU WANT TO.
# https://github.com/sirkris/WTFPL/blob/master/WTFPL.md

import argparse
import os
import sys

from swfheaders.core import SWFConstants as SC
from swfheaders.core import SWFData
from swfheaders.core import SWFExceptions
from swfheaders.core import SWFGlobals as SG
from swfheaders.core import SWFHeaders
from swfheaders.core import SWFLogger

def GetArgParser():
    
    argparser = argparse.ArgumentParser( description = 'swfheaders {}: read the header of swf files'.format( SC.SOFTWARE_VERSION ) )
    
    argparser.add_argument( 'paths', nargs = '+', help = 'the swf files to read' )
    argparser.add_argument( '--yaml', action = 'store_true', help = 'print each header as a yaml document' )
    argparser.add_argument( '--body_out', help = 'write the decompressed bytes after the header to this path (only works with one swf)' )
    argparser.add_argument( '--log_dir', help = 'also write all output to a log file in this directory' )
    argparser.add_argument( '--header_report_mode', action = 'store_true', help = 'print each step of header parsing' )
    argparser.add_argument( '--stream_report_mode', action = 'store_true', help = 'print which decompression the swf body uses' )
    argparser.add_argument( '--boot_debug', action = 'store_true', help = 'print additional bootup information' )
    
    return argparser
    

def GetHeaderText( path, headers: SWFHeaders.SWFHeaders ) -> str:
    
    ( width, height ) = headers.GetDimensions()
    ( width_twips, height_twips ) = headers.GetDimensionsTwips()
    
    lines = [
        path,
        '----------',
        'Signature:    {}'.format( SC.signature_tag_lookup[ headers.GetSignature() ] ),
        'Compression:  {}'.format( SC.signature_string_lookup[ headers.GetSignature() ] ),
        'Version:      {}'.format( headers.GetVersion() ),
        'File length:  {}'.format( headers.GetFileLength() ),
        'Dimensions:   {} x {} ({} x {} twips)'.format( width, height, width_twips, height_twips ),
        'Frames:       {}'.format( headers.GetFrameCount() ),
        'FPS:          {}'.format( headers.GetFrameRate() )
    ]
    
    return '\n'.join( lines )
    

def ReadPaths( paths, print_yaml = False, body_out = None, logger = None ) -> bool:
    
    everything_went_ok = True
    
    for path in paths:
        
        if logger is not None:
            
            logger.SetCurrentPath( path )
            
        
        try:
            
            ( headers, decoded_swf ) = SWFHeaders.Open( path )
            
        except ( SWFExceptions.NotSWFException, SWFExceptions.FractionalFrameRateException ) as e:
            
            SWFData.Print( '{}: could not read header: {}'.format( path, e ) )
            
            everything_went_ok = False
            
            continue
            
        except OSError as e:
            
            SWFData.Print( '{}: could not open: {}'.format( path, e ) )
            
            everything_went_ok = False
            
            continue
            
        
        with decoded_swf:
            
            if print_yaml:
                
                header_dict = { 'path' : path }
                
                header_dict.update( headers.ToDict() )
                
                SWFData.Print( SWFData.DumpToYAML( header_dict ).rstrip() )
                
            else:
                
                SWFData.Print( GetHeaderText( path, headers ) )
                
            
            if body_out is not None:
                
                try:
                    
                    WriteBody( decoded_swf, body_out )
                    
                except SWFExceptions.NotSWFException as e:
                    
                    SWFData.Print( '{}: could not write body: {}'.format( path, e ) )
                    
                    everything_went_ok = False
                    
                
            
        
    
    
    if logger is not None:
        
        logger.SetCurrentPath( None )
        
    
    return everything_went_ok
    

def WriteBody( decoded_swf, dest_path ):
    
    num_bytes_written = 0
    
    try:
        
        with open( dest_path, 'wb' ) as f:
            
            for block in SWFData.ReadFileLikeAsBlocks( decoded_swf ):
                
                f.write( block )
                
                num_bytes_written += len( block )
                
            
        
    except SWFExceptions.NotSWFException:
        
        # never leave a partial body behind
        if os.path.exists( dest_path ):
            
            os.remove( dest_path )
            
        
        raise
        
    
    SWFData.Print( 'Wrote {} body bytes to {}.'.format( num_bytes_written, dest_path ) )
    

def boot( args = None ) -> int:
    
    argparser = GetArgParser()
    
    result = argparser.parse_args( args )
    
    if result.body_out is not None and len( result.paths ) > 1:
        
        argparser.error( '--body_out only works with one swf path' )
        
    
    SG.boot_debug = result.boot_debug
    SG.header_report_mode = result.header_report_mode
    SG.stream_report_mode = result.stream_report_mode
    
    try:
        
        if result.log_dir is None:
            
            everything_went_ok = DoBoot( result )
            
        else:
            
            with SWFLogger.SWFLogger( result.log_dir, 'swfheaders' ) as logger:
                
                everything_went_ok = DoBoot( result, logger = logger )
                
            
        
    except Exception as e:
        
        SWFData.PrintException( e )
        
        everything_went_ok = False
        
    
    return 0 if everything_went_ok else 1
    

def DoBoot( result, logger = None ) -> bool:
    
    if SG.boot_debug:
        
        SWFData.DebugPrint( 'swfheaders v{} booting, python {}, reading {} path(s)'.format( SC.SOFTWARE_VERSION, sys.version.split()[0], len( result.paths ) ) )
        
    
    return ReadPaths( result.paths, print_yaml = result.yaml, body_out = result.body_out, logger = logger )
    

if __name__ == '__main__':
    
    sys.exit( boot() )
    
