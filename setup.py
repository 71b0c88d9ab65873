from setuptools import setup, find_packages

install_requires = [
    'celery',
    'Django',
    'djangorestframework',
    'dnspython',
    'redis',
]
tests_require = ['pytest', 'pytest-django', 'django-dynamic-fixture', 'factory_boy', 'mock']

setup(
    name='bindadmin',
    version='1.0.0',
    description="BIND zone manager",
    install_requires=install_requires,
    tests_require=tests_require,
    packages=find_packages(include=['bindadmin', 'bindadmin.*',
                                    'django_project', 'django_project.*']),
    extras_require={
        'test': tests_require
    },
    classifiers=[
        'Environment :: Web Environment',
        'Framework :: Django',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ]
)
