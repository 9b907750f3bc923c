import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="maryhdr",
    version="0.1.0",
    description="Reader/writer for the header of the MARY TTS data files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['maryhdr', 'maryhdr.*']),
    scripts=['scripts/maryinfo.py'],
    install_requires=[
        'bitstring>=4,<5',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
