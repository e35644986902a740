__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@loxpy.org"
__license__ = "MIT"
