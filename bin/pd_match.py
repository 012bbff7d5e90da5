#!/usr/bin/env python3
"""Plays a repeated Prisoner's Dilemma match (or a round-robin tournament) between strategies and prints the results."""

import argparse
import logging
import sys

from pdsim.game.errors import DuplicatePlayer, InvalidConfig, InvalidSeat, PayoffsUnset
from pdsim.game.match import Match
from pdsim.game.payoffs import CLASSIC, PayoffMatrix
from pdsim.game.strategies import STRATEGIES, parse_strategy
from pdsim.game.tournament import Tournament

logger = logging.getLogger('pd_match')


def print_match(match):
    print(match.payoffs)
    print('\nEvents:\n')
    print(match.outcome_table())
    print('\nResults (0 is cooperation, 1 is competition):\n')
    print(match.view_history())
    print('Scores:')
    for (label, score) in zip(match.labels(), match.scores()):
        print('{}: {:g}'.format(label, score))

def print_tournament(tournament):
    print(tournament.payoffs)
    print('\nMean score of each row strategy against each column strategy:\n')
    print(tournament.score_table())
    print('\nRanking:\n')
    print(tournament.ranking().to_string())


if __name__ == '__main__':

    parser = argparse.ArgumentParser(description = __doc__)
    parser.add_argument('strategies', nargs = '+', help = 'strategies as kind[:arg,arg], kind one of: {}'.format(', '.join(STRATEGIES)))
    parser.add_argument('-n', '--rounds', type = int, default = 100, help = 'number of rounds per match')
    parser.add_argument('--payoffs', type = float, nargs = 4, metavar = ('A', 'B', 'C', 'D'), help = 'payoffs for (coop, coop), (coop, compete), (compete, coop), (compete, compete)')
    parser.add_argument('--names', nargs = '+', help = 'display names for the strategies')
    parser.add_argument('--tournament', action = 'store_true', help = 'play a round-robin tournament between all the strategies')
    parser.add_argument('--repetitions', type = int, default = 1, help = 'matches per pairing in a tournament')
    parser.add_argument('--plot', action = 'store_true', help = 'plot cumulative scores of a single match')
    parser.add_argument('--seed', type = int, help = 'random seed')
    parser.add_argument('-v', '--verbose', action = 'store_true', help = 'verbosity flag')
    args = parser.parse_args()

    logging.basicConfig(level = logging.DEBUG if args.verbose else logging.WARNING, format = '%(levelname)s %(name)s: %(message)s')

    names = args.names or [None] * len(args.strategies)

    try:
        payoffs = CLASSIC if (args.payoffs is None) else PayoffMatrix(*args.payoffs)
        if (not payoffs.satisfies_dilemma()):
            logger.warning('payoffs do not satisfy c > a, b > d, d > a')
        if (len(names) != len(args.strategies)):
            raise InvalidConfig('got {} names for {} strategies'.format(len(names), len(args.strategies)))
        seeds = [None if (args.seed is None) else args.seed + i for i in range(len(args.strategies))]
        strategies = [parse_strategy(spec, name, seed) for (spec, name, seed) in zip(args.strategies, names, seeds)]
        if args.tournament:
            print_tournament(Tournament(strategies, args.rounds, payoffs, repetitions = args.repetitions, seed = args.seed))
        else:
            if (len(strategies) != 2):
                raise InvalidConfig('a single match needs exactly 2 strategies (use --tournament for more)')
            match = Match(strategies, args.rounds, payoffs)
            print_match(match)
            if args.plot:
                match.plot_cumulative_scores()
    except (InvalidConfig, DuplicatePlayer, InvalidSeat, PayoffsUnset) as e:
        logger.error(e)
        sys.exit(1)
