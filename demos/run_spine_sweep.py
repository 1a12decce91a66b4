import argparse
from pathlib import Path

from arrow_fem import AnalysisParams
from arrow_fem.explore import run_sweep


def main():
    parser = argparse.ArgumentParser(description="Sweep spine and point weight for one arrow build")
    parser.add_argument("--length", type=float, default=29.0, help="Shaft length (in)")
    parser.add_argument("--shaft-mass", type=float, default=13.0, help="Bare shaft mass (g)")
    parser.add_argument("--spines", type=float, nargs="+", default=[300, 340, 400, 500, 600])
    parser.add_argument("--tips", type=float, nargs="+", default=[100, 125, 150, 175])
    parser.add_argument("--out", type=str, default=None, help="Optional CSV output path")
    args = parser.parse_args()

    base = AnalysisParams(
        length_in=args.length,
        spine=500.0,
        shaft_mass_g=args.shaft_mass,
        nock_grains=8.0,
        fletching_grains=20.0,
        fletching_pos_in=2.0,
        velocity=75.0,
        power_stroke=0.7,
    )

    df = run_sweep(base, {'spine': args.spines, 'tip_grains': args.tips}, show_progress=True)

    # f1 table: rows = spine, columns = tip weight
    pivot = df.pivot(index='spine', columns='tip_grains', values='f1')
    print("First-mode frequency (Hz)")
    print(pivot.round(1).to_string())

    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(out, index=False)
        print(f"Saved {len(df)} rows to {out}")


if __name__ == "__main__":
    main()
