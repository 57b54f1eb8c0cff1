from setuptools import setup, find_packages

__version__ = '0.1'

setup(
    name='django_selfsigned',
    version=__version__,
    description='Self-signed X.509 certificates generation for Django',
    long_description="""""",
    author='https://github.com/kozzztik',
    url='https://github.com/kozzztik/django_selfsigned',
    keywords='x509 certificate self-signed ssl',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    python_requires='>=3.11',
    install_requires=[
        'Django>=4.2',
        'pyOpenSSL>=23.2',
        'cryptography>=42',
    ],
    extras_require={
        'test': ['pytest'],
    },
    license='https://github.com/kozzztik/django_selfsigned/blob/master/LICENSE',
    classifiers=[
        'License :: OSI Approved',
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3.11',
        ],
    )
