from setuptools import setup

setup(
    name='pemsign',
    version='0.1.0',
    description="RSA PKCS#1 v1.5 signing and verification"
    " with PEM encoded keys.",
    author='SiumLhahah',
    author_email='siumlhahah@outlook.com',
    packages=[
        'pemsign',
        'pemsign.lib',
    ],
    license='MIT',
    python_requires='>=3.11',
    install_requires=[
         'cryptography',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
