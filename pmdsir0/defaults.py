""" pmdsir0.defaults - logic for finding default settings """

import os

ZERO_DELTA_POLICIES = ('skip', 'emit')


def get_default_zero_delta_with_origin():
    """How the footer writer handles two equal pointers in a row.

    'skip' writes nothing for the repeated pointer.  'emit' writes a single
    zero byte, which is what some older tools do, even though a reader will
    take it as the end of the table.
    """
    policy = os.environ.get('PMD_SIR0_ZERO_DELTA', None)
    origin = 'environment'

    if policy is None:
        policy = 'skip'
        origin = 'default'
    elif policy not in ZERO_DELTA_POLICIES:
        raise ValueError(
            "PMD_SIR0_ZERO_DELTA must be one of {}, not {!r}".format(
                ', '.join(ZERO_DELTA_POLICIES), policy))

    return policy, origin


def get_default_zero_delta():
    return get_default_zero_delta_with_origin()[0]
