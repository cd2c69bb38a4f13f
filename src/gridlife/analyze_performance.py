"""
Performance Analysis & Visualization
Compares the per-cell reference stepper against the NumPy stepper using the
CSV files written by `gridlife --benchmark <method>`.
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from matplotlib.gridspec import GridSpec

from gridlife.config import BENCHMARK_DIR

COLORS = {
    'primary': '#2E86AB',
    'secondary': '#A23B72',
    'success': '#06A77D',
    'warning': '#F18F01',
    'danger': '#C73E1D',
}

TITLE_FONT = {'family': 'sans-serif', 'weight': 'bold', 'size': 16}
LABEL_FONT = {'family': 'sans-serif', 'weight': 'normal', 'size': 12}

METHOD_FILES = {
    'reference': 'benchmark_reference.csv',
    'numpy': 'benchmark_numpy.csv',
}


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Rename benchmark CSV columns to the names used by the analysis"""
    df = df.rename(columns={
        'size': 'grid_size',
        'total_time_ms': 'time_ms',
        'time_per_generation_ms': 'time_per_gen_ms',
        'cells_per_second_million': 'throughput_mcells_s',
    })
    if 'time_per_gen_ms' not in df.columns and 'generations' in df.columns:
        df['time_per_gen_ms'] = df['time_ms'] / df['generations']
    return df.sort_values('grid_size').reset_index(drop=True)


def load_data(benchmark_dir: Path | str = BENCHMARK_DIR) -> dict:
    """Load all benchmark data found in benchmark_dir"""
    data = {}
    benchmark_dir = Path(benchmark_dir)

    for key, filename in METHOD_FILES.items():
        path = benchmark_dir / filename
        if not path.exists():
            print(f"Warning: {key} data not found ({path})")
            continue
        df = normalize_columns(pd.read_csv(path))
        data[key] = df
        print(f"Loaded {key}: {len(df)} records from {path}")

    return data


def calculate_metrics(df_reference: pd.DataFrame | None, df_numpy: pd.DataFrame | None) -> dict:
    """Calculate speedup of the NumPy stepper over the reference stepper"""
    metrics = {}

    if df_reference is None or df_numpy is None:
        return metrics

    common_sizes = sorted(set(df_reference['grid_size'].unique()) & set(df_numpy['grid_size'].unique()))

    speedups = []
    for size in common_sizes:
        ref_time = df_reference[df_reference['grid_size'] == size]['time_per_gen_ms'].values[0]
        np_time = df_numpy[df_numpy['grid_size'] == size]['time_per_gen_ms'].values[0]
        speedups.append(ref_time / np_time)

    metrics['common_sizes'] = [int(s) for s in common_sizes]
    metrics['speedups'] = speedups

    # Find break-even point (where NumPy beats the reference stepper)
    breakeven_idx = next((i for i, s in enumerate(speedups) if s > 1), None)
    metrics['breakeven_size'] = metrics['common_sizes'][breakeven_idx] if breakeven_idx is not None else None

    return metrics


def create_speedup_dashboard(df_reference, df_numpy, metrics):
    """Dashboard with time per generation, throughput and speedup panels"""
    sns.set_style("darkgrid")
    sns.set_palette("husl")
    fig = plt.figure(figsize=(18, 6))
    fig.patch.set_facecolor('white')
    gs = GridSpec(1, 3, figure=fig, wspace=0.3)

    fig.suptitle('Game of Life: Reference vs NumPy Stepper',
                 fontsize=20, fontweight='bold', color=COLORS['primary'])

    series = [
        ('reference', df_reference, COLORS['secondary']),
        ('numpy', df_numpy, COLORS['success']),
    ]

    # PANEL 1: Time per generation
    ax1 = fig.add_subplot(gs[0, 0])
    for label, df, color in series:
        if df is not None:
            ax1.plot(df['grid_size'], df['time_per_gen_ms'], marker='o', linewidth=3,
                     markersize=8, label=label, color=color)
    ax1.set_xscale('log', base=2)
    ax1.set_yscale('log')
    ax1.set_xlabel('Grid Size (cells per side)', **LABEL_FONT)
    ax1.set_ylabel('Time per Generation (ms)', **LABEL_FONT)
    ax1.set_title('Time per Generation', **TITLE_FONT, pad=15)
    ax1.legend()

    # PANEL 2: Throughput
    ax2 = fig.add_subplot(gs[0, 1])
    for label, df, color in series:
        if df is not None:
            ax2.plot(df['grid_size'], df['throughput_mcells_s'], marker='s', linewidth=3,
                     markersize=8, label=label, color=color)
    ax2.set_xscale('log', base=2)
    ax2.set_xlabel('Grid Size (cells per side)', **LABEL_FONT)
    ax2.set_ylabel('Throughput (M cells/s)', **LABEL_FONT)
    ax2.set_title('Throughput', **TITLE_FONT, pad=15)
    ax2.legend()

    # PANEL 3: Speedup bars
    ax3 = fig.add_subplot(gs[0, 2])
    if metrics.get('speedups'):
        labels = [f"{s}×{s}" for s in metrics['common_sizes']]
        bars = ax3.bar(labels, metrics['speedups'], color=COLORS['warning'], edgecolor='black')
        ax3.axhline(y=1, color=COLORS['danger'], linestyle='--', linewidth=2)
        for bar, speedup in zip(bars, metrics['speedups']):
            ax3.text(bar.get_x() + bar.get_width() / 2, bar.get_height(),
                     f"{speedup:.1f}×", ha='center', va='bottom', fontsize=10, fontweight='bold')
    else:
        ax3.text(0.5, 0.5, 'No overlapping grid sizes', ha='center', va='center',
                 transform=ax3.transAxes)
    ax3.set_xlabel('Grid Size', **LABEL_FONT)
    ax3.set_ylabel('Speedup (reference / numpy)', **LABEL_FONT)
    ax3.set_title('NumPy Speedup', **TITLE_FONT, pad=15)

    return fig


def print_summary(data, metrics):
    """Print terminal summary"""
    print("\n" + "=" * 60)
    print("PERFORMANCE SUMMARY")
    print("=" * 60)

    for key, df in data.items():
        best = df.loc[df['throughput_mcells_s'].idxmax()]
        print(f"\n{key.upper()} STEPPER:")
        print(f"   Peak Throughput: {best['throughput_mcells_s']:.2f} M cells/s")
        print(f"   Grid Size: {int(best['grid_size'])}×{int(best['grid_size'])}")

    if metrics.get('speedups'):
        print(f"\nSPEEDUP STATISTICS (NumPy vs reference):")
        print(f"   Average Speedup: {np.mean(metrics['speedups']):>8.2f}×")
        print(f"   Maximum Speedup: {np.max(metrics['speedups']):>8.2f}×")
        print(f"   Minimum Speedup: {np.min(metrics['speedups']):>8.2f}×")

    if metrics.get('breakeven_size'):
        print(f"\nBREAK-EVEN POINT:")
        print(f"   Grid Size: {metrics['breakeven_size']}×{metrics['breakeven_size']} (NumPy starts winning)")

    print("\n" + "=" * 60 + "\n")


def main(argv: list[str] | None = None) -> None:
    """Main analysis function"""
    args = sys.argv[1:] if argv is None else argv
    benchmark_dir = Path(args[0]) if args else BENCHMARK_DIR

    print("\nLoading benchmark data...")
    data = load_data(benchmark_dir)

    if not data:
        print("\nError: No benchmark data found!")
        print("\nPlease run benchmarks first:")
        print("  gridlife --benchmark reference")
        print("  gridlife --benchmark numpy")
        sys.exit(1)

    print("\nCalculating performance metrics...")
    metrics = calculate_metrics(data.get('reference'), data.get('numpy'))

    print("\nGenerating analysis dashboard...")
    fig = create_speedup_dashboard(data.get('reference'), data.get('numpy'), metrics)
    output_path = benchmark_dir / 'performance_analysis_dashboard.png'
    fig.savefig(output_path, dpi=150, bbox_inches='tight', facecolor='white')
    plt.close(fig)
    print(f"    Saved: {output_path}")

    print_summary(data, metrics)
    print("Analysis complete!")


if __name__ == "__main__":
    main()
