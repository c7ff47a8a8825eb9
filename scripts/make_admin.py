"""Provision an admin credential out-of-band.

Usage: python scripts/make_admin.py USERNAME PASSWORD
"""
import logging
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from signup import create_app
from signup.extensions import get_admins


def main(argv):
    if len(argv) != 3:
        print(__doc__)
        return 1

    logging.basicConfig(level=logging.INFO)
    app = create_app()
    with app.app_context():
        admin = get_admins().provision(argv[1], argv[2])
        print(f'Admin {admin.username} ready')
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
