import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pquads",
    version="0.0.1",
    author="Gianluca Pacchiella",
    author_email="gp@ktln2.org",
    description="Protobuf-encoded RDF quads streams",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/gipi/pquads",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    scripts=[
        'scripts/nq2pq.py',
        'scripts/pq2nq.py',
        'scripts/pqinfo.py',
    ],
    install_requires=[
        'bitstring',
        'rdflib',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GPLv2 License",
        "Operating System :: OS Independent",
    ],
)
