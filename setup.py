from setuptools import setup, find_packages

extras = {'socks': ['pysocks'],
          'test': ['pytest', 'pytest-httpserver']}

setup(name='python-redfishbind',
      version='1.0.0',
      description='Redfish resource binding with minimal PATCH updates',
      author = 'Hewlett Packard Enterprise',
      extras_require = extras,
      classifiers=[
          'Development Status :: 4 - Beta',
          'License :: OSI Approved :: Apache Software License',
          'Programming Language :: Python :: 3',
          'Topic :: Communications',
          'Topic :: System :: Hardware'
      ],
      keywords='Redfish DMTF REST binding',
      python_requires='>=3.6',
      packages=find_packages('src'),
      package_dir={'': 'src'},
      install_requires=[
          'jsonpatch',
          'jsonpath_rw',
          'jsonpointer',
          'urllib3'
      ])
