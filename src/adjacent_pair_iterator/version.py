__version__ = '1.0.0'
__title__ = 'adjacent-pair-iterator'
__author__ = 'Malcolm Ramsay'
__author_email__ = 'malramsay64@gmail.com'
__description__ = 'Lazy iterator adaptors yielding adjacent and cyclic adjacent pairs'
__license__ = 'MIT'
