from setuptools import setup, find_packages

setup(name='quiztrainer',
      version='0.2.0',
      description='interactive question/answer quiz trainer',
      author='gront',
      packages=find_packages(exclude=['tests', 'tests.*']),
      install_requires=[
          'pandas',
          'numpy',
          'colorama>=0.4.6',
      ],
      extras_require={
          'excel': ['openpyxl', 'odfpy'],
          'test': ['pytest'],
      },
      entry_points={
          'console_scripts': [
              'quiztrainer = quiztrainer.cli:main',
          ],
      },
     )
