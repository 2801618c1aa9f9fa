from setuptools import setup, find_packages

setup(
    name='pmd-sir0',
    version='0.1',
    zip_safe=False,
    packages=find_packages(),
    install_requires=[
        'construct>=2.10',
        'attrs>=19.1',
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
    ]
)
