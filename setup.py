import setuptools

setuptools.setup(
    name='jpdatekit',
    packages=setuptools.find_packages(exclude=['tests']),
    version='0.0.1',
    description='Japanese date formatting and epoch conversion tools',
    long_description=open('README.md', 'r', encoding='utf-8').read(),
    long_description_content_type='text/markdown',
    python_requires='>=3.8',
    install_requires=[
        'pyperclip',
        'python-dateutil',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
