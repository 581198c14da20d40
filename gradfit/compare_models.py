import argparse
import os
from datetime import datetime, timezone

import matplotlib.pyplot as plt
import pandas as pd
from sklearn.linear_model import LinearRegression
from sklearn.metrics import mean_squared_error, r2_score
from sklearn.model_selection import train_test_split

from .datasets import prepare_features
from .linear_regression import LinearRegressionModel
from .plotting import plot_error_trace


DEFAULT_INPUT = "data/dataset.csv"
DEFAULT_RESULTS_DIR = "results"
DEFAULT_LEARNING_RATE = 0.01
DEFAULT_MAX_ITERATIONS = 2000


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def compare_linear(X_train, X_test, y_train, y_test, learning_rate: float, max_iterations: int):
    custom = LinearRegressionModel(learning_rate, max_iterations).fit(X_train, y_train)
    sk_model = LinearRegression().fit(X_train, y_train)

    custom_pred = custom.predict(X_test)
    sk_pred = sk_model.predict(X_test)

    metrics = pd.DataFrame(
        [
            {
                "model": "gradient_descent",
                "mse": mean_squared_error(y_test, custom_pred),
                "r2": r2_score(y_test, custom_pred),
            },
            {
                "model": "sklearn",
                "mse": mean_squared_error(y_test, sk_pred),
                "r2": r2_score(y_test, sk_pred),
            },
        ]
    )

    coef = pd.DataFrame(
        {
            "parameter": ["intercept", *X_train.columns],
            "gradient_descent": [custom.bias, *custom.weights],
            "sklearn": [sk_model.intercept_, *sk_model.coef_],
        }
    )

    return custom, sk_model, custom_pred, sk_pred, metrics, coef


def plot_predictions(y_test, custom_pred, sk_pred, out_dir: str) -> None:
    plt.figure(figsize=(10, 4))
    plt.subplot(1, 2, 1)
    plt.scatter(y_test, custom_pred, s=10, alpha=0.7)
    plt.xlabel("True")
    plt.ylabel("Gradient Descent Pred")
    plt.title("Gradient Descent")

    plt.subplot(1, 2, 2)
    plt.scatter(y_test, sk_pred, s=10, alpha=0.7)
    plt.xlabel("True")
    plt.ylabel("Sklearn Pred")
    plt.title("Sklearn")

    plt.tight_layout()
    plt.savefig(os.path.join(out_dir, "predictions.png"), dpi=150)
    plt.close()


def run_comparison(
    df: pd.DataFrame,
    target: str,
    results_dir: str,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    features: list[str] | None = None,
) -> str:
    """Write metrics, coefficients, predictions and figures; return the output directory."""
    X, y = prepare_features(df, target, features)
    X_train, X_test, y_train, y_test = train_test_split(X, y, test_size=0.2, random_state=42)

    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    out_dir = os.path.join(results_dir, "compare", timestamp)
    ensure_dir(out_dir)

    custom, _sk_model, custom_pred, sk_pred, metrics, coef = compare_linear(
        X_train, X_test, y_train, y_test, learning_rate, max_iterations
    )

    metrics.to_csv(os.path.join(out_dir, "metrics.csv"), index=False)
    coef.to_csv(os.path.join(out_dir, "coefficients.csv"), index=False)

    preds = pd.DataFrame(
        {
            "y_true": y_test.values,
            "gradient_descent_pred": custom_pred,
            "sklearn_pred": sk_pred,
        }
    )
    preds.to_csv(os.path.join(out_dir, "predictions.csv"), index=False)

    plot_predictions(y_test, custom_pred, sk_pred, out_dir)
    plot_error_trace(
        {f"lr={learning_rate}": custom.error_trace},
        os.path.join(out_dir, "error_trace.png"),
        "Gradient Descent Error Trace",
    )

    return out_dir


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare gradient descent vs sklearn linear regression.")
    parser.add_argument("--input", default=DEFAULT_INPUT, help="CSV input.")
    parser.add_argument("--target", default="y", help="Target column.")
    parser.add_argument(
        "--features",
        nargs="*",
        default=None,
        help="Feature columns (default: all other numeric columns).",
    )
    parser.add_argument(
        "--results-dir",
        default=DEFAULT_RESULTS_DIR,
        help="Directory to save outputs.",
    )
    parser.add_argument("--lr", type=float, default=DEFAULT_LEARNING_RATE, help="Learning rate.")
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=DEFAULT_MAX_ITERATIONS,
        help="Gradient descent iteration bound.",
    )
    return parser


def main() -> None:
    args = build_parser().parse_args()
    df = pd.read_csv(args.input)

    out_dir = run_comparison(
        df, args.target, args.results_dir, args.lr, args.max_iterations, args.features
    )
    print(f"Saved: {out_dir}")


if __name__ == "__main__":
    main()
