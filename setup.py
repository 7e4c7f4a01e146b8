from setuptools import setup, find_packages

setup(
    name='ubootenv',
    version='0.1',
    packages=find_packages(exclude=['tests']),
    include_package_data=True,
    install_requires=[
        'click',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'ubootenv = ubootenv.cli:cli',
        ],
    },
)
