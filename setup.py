"""
semconll setup: semconll is a library for holding linguistic standoff
annotations and writing them out in the CoNLL-2009 format
"""

from setuptools import setup, find_packages
import glob
import os

REQS = [
    'nltk >= 3.0.0',
    'tabulate',
]


setup(name='semconll',
      version='0.3',
      author='Eric Kow',
      author_email='eric@erickow.com',
      packages=find_packages(),
      scripts=[f for f in glob.glob('scripts/*') if not os.path.isdir(f)],
      install_requires=REQS,
      extras_require={'test': ['pytest']})
