# runtime flags, set by the boot script or by hand from a python prompt

boot_debug = False

header_report_mode = False
stream_report_mode = False
