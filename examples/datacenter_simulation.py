from vivaldi import Model, estimate_rtt_ms
from vivaldi.env import load_env


def run():
    env = load_env()
    logger = env.configure_logging()
    config = env.get_vivaldi_config()
    vector_type = env.get_vector_type()

    # Two nodes in one datacenter, one across a slow link.
    dc1_a = Model(vector_type, config=config, logger=logger)
    dc1_b = Model(vector_type, config=config, logger=logger)
    dc2_c = Model(vector_type, config=config, logger=logger)

    links = [
        (dc1_a, dc1_b, 0.001),
        (dc1_a, dc2_c, 0.080),
    ]

    for _ in range(200):
        for local, remote, rtt in links:
            local.observe(remote.get_coordinate(), rtt)
            remote.observe(local.get_coordinate(), rtt)

    # dc1_b and dc2_c never measured each other.
    print(f"a <-> b: {estimate_rtt_ms(dc1_a.get_coordinate(), dc1_b.get_coordinate()):.2f}ms")
    print(f"a <-> c: {estimate_rtt_ms(dc1_a.get_coordinate(), dc2_c.get_coordinate()):.2f}ms")
    print(f"b <-> c: {estimate_rtt_ms(dc1_b.get_coordinate(), dc2_c.get_coordinate()):.2f}ms")
    print(dc1_a.get_coordinate().to_dict())

    logger.close()


run()
