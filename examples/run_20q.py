from twentyq import CorpusOracle, GameRunner, InferenceEngine, load_sample_corpus


def main() -> None:
    pairs = load_sample_corpus()
    secret = "Marie Curie"
    engine = InferenceEngine.from_pairs(pairs)
    oracle = CorpusOracle(pairs, secret)

    result = GameRunner(engine, oracle, verbose=True).play()

    print("outcome:", result.outcome)
    print("guess:", result.guess)
    print("turns:", result.turns)
    for message in oracle.messages:
        print(" ", message)


if __name__ == "__main__":
    main()
