import setuptools
from swfheaders.core.SWFConstants import SOFTWARE_VERSION

NAME = 'swfheaders'
AUTHOR = ""
AUTHOR_EMAIL = ""

__version__ = str( SOFTWARE_VERSION )

with open("README.md", "r") as fh:
    LONG_DESCRIPTION = fh.read()

def read_requirements( path ):
    with open( path, "r" ) as fh:
        return [ line.strip() for line in fh.read().split( "\n" ) if line.strip() != '' and not line.startswith( '#' ) ]

REQUIREMENTS = read_requirements( "requirements.txt" )
TEST_PACKAGES = read_requirements( "requirements-tests.txt" )

setuptools.setup(
    name=NAME,
    version=__version__,
    author=AUTHOR,
    author_email=AUTHOR_EMAIL,
    description="Reads the header of swf files and hands back the decompressed rest of the file.",
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    license="WTFPL",
    python_requires=">=3.8",
    tests_require=TEST_PACKAGES,
    packages=setuptools.find_namespace_packages( include = [ 'swfheaders', 'swfheaders.*' ] ),
    scripts=['swfinfo.py'],
    include_package_data=True,
    zip_safe=False,
    extras_require={
        'tests': TEST_PACKAGES
    },
    install_requires=REQUIREMENTS,
    classifiers=[],
)
