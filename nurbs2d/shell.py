''' Start an IPython session with nurbs2d preloaded. '''

import argparse
import logging

from traitlets.config import Config


def make_config():

    ''' Build the configuration of the interactive session.

    '''

    config = Config()

    # InteractiveShell configuration
    config.InteractiveShell.banner2 = 'Welcome to nurbs2d!\n'

    # InteractiveShellApp configuration
    config.InteractiveShellApp.exec_lines = [

            'import nurbs2d',
            'from nurbs2d        import tb',
            'from nurbs2d.point  import ControlPoint',
            'from nurbs2d.curve  import Curve',

            'import numpy as np',
            'np.set_printoptions(linewidth=79)'

    ]

    return config


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--debug', action='store_true',
                        help='log degenerate evaluations')
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    import IPython
    return IPython.start_ipython(argv=[], config=make_config())


if __name__ == '__main__':
    main()
