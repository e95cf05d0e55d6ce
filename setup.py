import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='sklearn_hasse',
    version='0.0',
    packages=setuptools.find_packages(),
    license='BSD',
    description='Covering relation (Hasse diagram edges) of the subset order '
                'on a corpus of sets, with hash, sorted-array and bitset '
                'representations.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires='>=3.7',
    install_requires=[
        'scikit_learn >= 0.22',
        'numpy >= 1.17',
        'tqdm',
    ],
    extras_require={
        'tests': ['matplotlib', 'pytest >= 3.5'],
        'numba': ['numba'],
    },
    entry_points={
        'console_scripts': ['hasse-cover = sklearn_hasse.cli:main'],
    },
)
