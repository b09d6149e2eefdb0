import logging
import argparse
import os
import sys

from core.config_loader import load_config

logger = logging.getLogger(__name__)


def run_assign(config, family_id, trigger_type=None, idempotency_key=None, session_factory=None):
    """Run one automatic assignment pass from the command line."""
    from database.uow import matching_uow
    from core.scorer import MatchScorer
    from core.matcher import AssignmentService, FamilyNotFoundError

    try:
        with matching_uow(session_factory) as store:
            service = AssignmentService(
                store,
                MatchScorer(config.matching.scorer),
                config.matching.assignment
            )
            outcome = service.assign_best_caregiver(
                family_id,
                trigger_type=trigger_type,
                idempotency_key=idempotency_key
            )
    except FamilyNotFoundError as e:
        logger.error(f"{e}: {family_id}")
        return 1

    if outcome.assigned:
        logger.info(
            f"Assigned caregiver {outcome.assignment.caregiver_id} "
            f"(score={outcome.top_match.match_score:.2f}, "
            f"evaluated={outcome.total_matches_evaluated})"
        )
    else:
        logger.info(f"{outcome.message} (evaluated={outcome.total_matches_evaluated})")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Tavara Matching Service")
    parser.add_argument('--mode', type=str, choices=['serve', 'init-db', 'assign'], default='serve',
                        help="serve: run the API; init-db: create tables; assign: run one assignment")
    parser.add_argument('--config', type=str, default='config.yaml',
                        help="Path to config.yaml: database URL, logging, web server and matching "
                             "settings for every mode")
    parser.add_argument('--family-id', type=str, help="Family profile id (assign mode)")
    parser.add_argument('--trigger-type', type=str, default=None, help="Trigger label (assign mode)")
    parser.add_argument('--idempotency-key', type=str, default=None, help="Idempotency key (assign mode)")
    args = parser.parse_args(argv)

    config = load_config(args.config)

    logging.basicConfig(
        level=config.logging.level,
        format=config.logging.format
    )

    if args.mode == 'serve':
        # The app loads its own config; point it at the same file
        os.environ["TAVARA_CONFIG"] = os.path.abspath(args.config)
        from web.backend.app import main as serve
        serve()
        return 0

    if args.mode == 'assign' and not args.family_id:
        parser.error("--family-id is required in assign mode")

    from database.database import make_engine, make_session_factory
    engine = make_engine(config.database.url)

    if args.mode == 'init-db':
        from database.init_db import init_db
        init_db(bind=engine)
        return 0

    return run_assign(
        config,
        args.family_id,
        args.trigger_type,
        args.idempotency_key,
        session_factory=make_session_factory(engine)
    )


if __name__ == "__main__":
    sys.exit(main())
