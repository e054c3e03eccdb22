import unittest
import sys
import os

# Add parent directory to path to import modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib
matplotlib.use("Agg")

from tubecut.models import Detail, CuttingPlan
from tubecut.optimization import optimize_cutting
from tubecut.reporting import PlanReport

class TestPlanReport(unittest.TestCase):
    def setUp(self):
        # 2 x (A, A) with 200 rest, 1 x (A) with 600 rest, Y too long
        self.plan = optimize_cutting([Detail("A", 400, 5), Detail("Y", 1500, 2)], 1000)

    def test_summary(self):
        res = PlanReport.summary(self.plan)
        self.assertEqual(res['units'], 3)
        self.assertEqual(res['waste'], 1000)
        self.assertAlmostEqual(res['efficiency'], 1 - 1000 / 3000)
        self.assertFalse(res['complete'])

    def test_groups_frame(self):
        df = PlanReport.groups_frame(self.plan)
        self.assertEqual(len(df), 2)
        self.assertEqual(list(df['Anzahl']), [2, 1])
        self.assertEqual(df.iloc[0]['Schnitte'], "A (400), A (400)")
        self.assertEqual(df.iloc[0]['Rest je Stange'], 200)
        self.assertEqual(df.iloc[0]['Rest gesamt'], 400)
        self.assertEqual(df.iloc[1]['Typ'], "Type 2 (A)")

    def test_cut_list_frame(self):
        df = PlanReport.cut_list_frame(self.plan)
        self.assertEqual(len(df), 5)
        self.assertEqual(list(df['Stange']), [1, 1, 2, 2, 3])
        self.assertEqual(df['Länge'].sum(), 2000)
        self.assertEqual(list(df['Genutzt']), [800, 800, 800, 800, 400])
        self.assertTrue(((df['Genutzt'] + df['Rest']) == 1000).all())

    def test_leftover_frame(self):
        df = PlanReport.leftover_frame(self.plan)
        self.assertEqual(len(df), 1)
        self.assertEqual(df.iloc[0]['Teil'], "Y")
        self.assertEqual(df.iloc[0]['Menge'], 2)
        self.assertEqual(df.iloc[0]['Grund'], "exceeds_stock_length")

    def test_empty_plan_frames(self):
        empty = CuttingPlan()
        self.assertTrue(PlanReport.groups_frame(empty).empty)
        self.assertTrue(PlanReport.cut_list_frame(empty).empty)
        self.assertTrue(PlanReport.leftover_frame(empty).empty)
        self.assertIn('Typ', PlanReport.groups_frame(empty).columns)

    def test_plot_cutting_plan(self):
        fig = PlanReport.plot_cutting_plan(self.plan)
        self.assertIsNotNone(fig)
        ax = fig.axes[0]
        self.assertEqual(len(ax.get_yticklabels()), 2)
        self.assertEqual(ax.get_yticklabels()[0].get_text(), "Typ 1 × 2")

    def test_plot_empty_plan(self):
        self.assertIsNone(PlanReport.plot_cutting_plan(CuttingPlan()))

if __name__ == '__main__':
    unittest.main()
