import pandas as pd
import matplotlib.pyplot as plt

from tubecut.models import CuttingPlan

def _format_pieces(pieces) -> str:
    return ", ".join(f"{d.name} ({d.length:g})" for d in pieces)

class PlanReport:
    @staticmethod
    def summary(plan: CuttingPlan) -> dict:
        return {"units": plan.total_units_used, "waste": plan.total_waste,
                "efficiency": plan.efficiency, "complete": plan.complete}

    @staticmethod
    def groups_frame(plan: CuttingPlan) -> pd.DataFrame:
        cols = ['Typ', 'Anzahl', 'Schnitte', 'Rest je Stange', 'Rest gesamt']
        if not plan.groups: return pd.DataFrame(columns=cols)
        rows = []
        for g in plan.groups:
            rows.append({
                'Typ': g.label,
                'Anzahl': g.unit_count,
                'Schnitte': _format_pieces(g.pieces),
                'Rest je Stange': g.units[0].remaining_capacity,
                'Rest gesamt': g.total_waste,
            })
        return pd.DataFrame(rows, columns=cols)

    @staticmethod
    def cut_list_frame(plan: CuttingPlan) -> pd.DataFrame:
        """
        Saw list: one row per cut piece, stock units numbered over all groups.
        """
        cols = ['Stange', 'Typ', 'Teil', 'Länge', 'Genutzt', 'Rest']
        rows = []
        unit_no = 0
        for g in plan.groups:
            for unit in g.units:
                unit_no += 1
                for piece in unit.placed_pieces:
                    rows.append({'Stange': unit_no, 'Typ': g.label, 'Teil': piece.name,
                                 'Länge': piece.length, 'Genutzt': unit.used_length,
                                 'Rest': unit.remaining_capacity})
        return pd.DataFrame(rows, columns=cols)

    @staticmethod
    def leftover_frame(plan: CuttingPlan) -> pd.DataFrame:
        cols = ['Teil', 'Länge', 'Menge', 'Grund']
        rows = [{'Teil': u.name, 'Länge': u.length, 'Menge': u.amount, 'Grund': u.reason} for u in plan.unplaceable]
        return pd.DataFrame(rows, columns=cols)

    @staticmethod
    def plot_cutting_plan(plan: CuttingPlan):
        """
        Visualizes the cutting plan.
        One bar per pattern group, drawn from its first stock unit.
        """
        if not plan.groups: return None

        num_groups = len(plan.groups)
        fig, ax = plt.subplots(figsize=(10, max(2, num_groups * 0.8)))
        bar_height = 0.6
        colors = ['#3b82f6', '#10b981', '#f59e0b', '#8b5cf6', '#ec4899', '#6366f1']

        for i, group in enumerate(plan.groups):
            unit = group.units[0]
            ax.barh(i, unit.capacity, height=bar_height, color='#f1f5f9', edgecolor='#cbd5e1', linewidth=1)

            x_start = 0
            for j, piece in enumerate(unit.placed_pieces):
                ax.barh(i, piece.length, height=bar_height, left=x_start, color=colors[j % len(colors)], edgecolor='white', alpha=0.9)
                if piece.length > unit.capacity * 0.05:
                    ax.text(x_start + piece.length/2, i, f"{piece.name}\n{piece.length:g}", ha='center', va='center', color='white', fontsize=7, fontweight='bold')
                x_start += piece.length

            if unit.remaining_capacity > 0:
                ax.text(unit.capacity, i, f"Rest: {unit.remaining_capacity:.1f}", ha='right', va='center', color='#94a3b8', fontsize=8, alpha=0.8)

        ax.set_yticks(range(num_groups))
        ax.set_yticklabels([f"Typ {i + 1} × {g.unit_count}" for i, g in enumerate(plan.groups)])
        ax.set_xlabel("Länge (mm)")
        ax.set_xlim(0, plan.capacity * 1.05)
        ax.invert_yaxis()
        plt.tight_layout()
        plt.close(fig)
        return fig
