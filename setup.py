import setuptools

from xliffsync.version import __version__

with open('README.md', 'r') as input_file:
    long_description = input_file.read()

setuptools.setup(
    name='xliffsync',
    version=__version__,
    description='A document model for synchronizing XLIFF 1.2 and 2.0 translation files',
    keywords = ['XLIFF', 'localization', 'translation', 'i18n'],
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(exclude=['tests']),
    install_requires=[
        'lxml',
        'pytoml',
        'regex'
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
    ],
)
