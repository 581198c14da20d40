import argparse
import os
import sys
from datetime import datetime, timezone

from gradfit.compare_models import main as compare_main
from gradfit.datasets import NORRIS_CERTIFIED, load_csv_dataset, make_dataset, norris
from gradfit.linear_regression import LinearRegressionModel
from gradfit.plotting import plot_error_trace, plot_fit


DEFAULT_RESULTS_DIR = "results"
DEFAULT_LEARNING_RATE = 0.0001
DEFAULT_MAX_ITERATIONS = 10000


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def make_out_dir(results_dir: str, mode: str) -> str:
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    out_dir = os.path.join(results_dir, mode, timestamp)
    ensure_dir(out_dir)
    return out_dir


def fit_and_report(dataset, learning_rate: float, max_iterations: int, out_dir: str) -> LinearRegressionModel:
    model = LinearRegressionModel(learning_rate, max_iterations).fit_supervised_dataset(dataset)
    if model.function is None:
        raise ValueError("Dataset has no input variables to fit.")

    print(f"Parameters: {model.function.parameters().tolist()}")
    if model.error_trace:
        print(f"Final error: {model.error_trace[-1]}")

    if model.function.input_size == 1:
        inputs = [x[0] for x, _ in dataset]
        labels = [y for _, y in dataset]
        fit_path = os.path.join(out_dir, "fit.png")
        plot_fit(inputs, labels, model.function, fit_path)
        print(f"Saved: {fit_path}")

    trace_path = os.path.join(out_dir, "error_trace.png")
    plot_error_trace({f"lr={learning_rate}": model.error_trace}, trace_path, "Error Trace")
    print(f"Saved: {trace_path}")
    return model


def run_demo(args: argparse.Namespace) -> None:
    inputs = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    labels = [-2.0 * x for x in inputs]
    out_dir = make_out_dir(args.results_dir, "demo")
    fit_and_report(make_dataset(inputs, labels), args.lr, args.max_iterations, out_dir)


def run_fit(args: argparse.Namespace) -> None:
    dataset = load_csv_dataset(args.input, args.target, args.features)
    out_dir = make_out_dir(args.results_dir, "fit")
    fit_and_report(dataset, args.lr, args.max_iterations, out_dir)


def run_norris(args: argparse.Namespace) -> None:
    out_dir = make_out_dir(args.results_dir, "norris")
    model = fit_and_report(norris(), args.lr, args.max_iterations, out_dir)
    for name, value in (("intercept", model.bias), ("slope", float(model.weights[0]))):
        certified, sd = NORRIS_CERTIFIED[name]
        print(f"{name}: {value} (certified {certified} +/- {sd})")


def run_compare_script(args: argparse.Namespace) -> None:
    original_argv = sys.argv
    try:
        sys.argv = [
            "compare_models",
            "--input", args.input,
            "--target", args.target,
            "--results-dir", args.results_dir,
            "--lr", str(args.lr),
            "--max-iterations", str(args.max_iterations),
        ]
        if args.features:
            sys.argv += ["--features", *args.features]
        compare_main()
    finally:
        sys.argv = original_argv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Least-squares gradient descent fitting.")
    parser.add_argument(
        "--mode",
        choices=["demo", "fit", "norris", "compare"],
        default="demo",
        help="Run mode.",
    )
    parser.add_argument("--input", default=None, help="CSV input for fit and compare modes.")
    parser.add_argument("--target", default="y", help="Target column.")
    parser.add_argument(
        "--features",
        nargs="*",
        default=None,
        help="Feature columns (default: all other numeric columns).",
    )
    parser.add_argument("--lr", type=float, default=DEFAULT_LEARNING_RATE, help="Learning rate.")
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=DEFAULT_MAX_ITERATIONS,
        help="Gradient descent iteration bound.",
    )
    parser.add_argument(
        "--results-dir",
        default=DEFAULT_RESULTS_DIR,
        help="Directory to save figures.",
    )
    return parser


def main() -> None:
    args = build_parser().parse_args()

    if args.mode in {"fit", "compare"} and args.input is None:
        raise ValueError("--input is required for fit and compare modes.")

    if args.mode == "fit":
        run_fit(args)
        return

    if args.mode == "norris":
        run_norris(args)
        return

    if args.mode == "compare":
        run_compare_script(args)
        return

    run_demo(args)


if __name__ == "__main__":
    main()
