from setuptools import setup, find_namespace_packages


if __name__ == '__main__':
    with open('./src/ldapgen/__init__.py', 'r') as f:
        version_line = [line for line in f.readlines() if 'VERSION' in line][0]
        version = version_line.split('=')[1].strip(" '\n")

    setup(
        name='ldapgen',
        version=version,
        packages=find_namespace_packages(where='src'),
        package_dir={'': 'src'},
        description='LDAPGEN - fake LDAP entries generator',
        python_requires='>=3.10',
        install_requires=[
            'python-ldap',
            'coloredlogs',
            'faker',
        ],
        extras_require={
            'test': [
                'pytest',
            ],
        },
    )
