from setuptools import setup, find_packages

setup(
    name='memoiter',
    version='0.0.1',
    description='Memoized iterators: index into lazily produced sequences without recomputation',
    long_description='This library pairs an iterator with a list that stores its values, so that every value produced once can be retrieved by index later on.',

    packages=find_packages(exclude=['*.tests', '*.tests.*', 'tests.*', 'tests', 'examples']),

    license='MIT',

    # A list of classifiers can be found at
    # https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 3 - Alpha',

        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries :: Python Modules',

        'License :: OSI Approved :: MIT License',

        'Programming Language :: Python :: 3',
    ],
)
